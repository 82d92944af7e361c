"""relpos - GWAC JFoV/FFoV 相对指向计算"""

__version__ = "1.0.0"
