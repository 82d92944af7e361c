"""Data layer - 指向数据文件读取与解析."""
