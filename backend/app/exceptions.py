"""
异常定义模块
启动失败和数据访问失败的异常层次
"""


class AppError(Exception):
    """应用异常基类"""


class ServerStartupError(AppError):
    """嵌入式服务器启动失败（例如无法创建临时工作目录）"""


class DatabaseStartupError(AppError):
    """嵌入式数据库初始化失败"""


class DataAccessError(AppError):
    """
    数据访问失败

    由 Repository 将底层 SQLAlchemyError 转换而来，原始异常保存在 __cause__ 中
    """
