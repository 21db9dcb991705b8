"""
日志配置模块
提供统一的日志记录功能
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from ischinese.config import settings


def setup_logger(
    name: str,
    log_file: Optional[Path] = None,
    level: str = None
) -> logging.Logger:
    """
    配置并返回logger实例

    Args:
        name: logger名称
        log_file: 日志文件路径，如果为None则只输出到控制台
        level: 日志级别，默认使用配置中的级别

    Returns:
        配置好的logger实例
    """
    logger = logging.getLogger(name)

    # 如果logger已经配置过，直接返回
    if logger.handlers:
        return logger

    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper())
    logger.setLevel(log_level)

    formatter = logging.Formatter(settings.LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # 防止日志向上传播
    logger.propagate = False

    return logger


def get_logger(name: str = "ischinese") -> logging.Logger:
    """
    获取logger实例（便捷方法）
    配置了 LOG_DIR 时所有logger共享同一个日志文件

    Args:
        name: logger名称

    Returns:
        logger实例
    """
    return setup_logger(name, settings.log_file)
