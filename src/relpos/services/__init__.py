"""Service layer - 处理流程编排."""
