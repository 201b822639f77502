"""
彩色日志配置模块
Coloured console logging for the token service and the debug script.
"""
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


class ColorfulFormatter(logging.Formatter):
    """ANSI 彩色格式化器, used when output is not an interactive terminal"""

    COLORS = {
        'DEBUG': '\033[36m',      # 青色
        'INFO': '\033[32m',       # 绿色
        'WARNING': '\033[33m',    # 黄色
        'ERROR': '\033[31m',      # 红色
        'CRITICAL': '\033[35m',   # 紫色
    }
    TIME_COLOR = '\033[34m'
    RESET = '\033[0m'

    def format(self, record):
        message = super().format(record)

        if self._fmt and '%(asctime)s' in self._fmt:
            time_str = self.formatTime(record, self.datefmt)
            message = message.replace(time_str, f"{self.TIME_COLOR}{time_str}{self.RESET}", 1)

        level_name = record.levelname
        if level_name in self.COLORS:
            message = message.replace(level_name, f"{self.COLORS[level_name]}{level_name}{self.RESET}", 1)

        return message


def _make_rich_handler() -> logging.Handler:
    console = Console(stderr=True)
    handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        enable_link_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_width=console.width,
        tracebacks_show_locals=False,
    )
    # RichHandler already renders time and level
    handler.setFormatter(logging.Formatter('%(message)s', datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def _make_ansi_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ColorfulFormatter(
        '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    return handler


def setup_colorful_logging(
    level: int = logging.INFO,
    name: Optional[str] = None,
    use_rich: Optional[bool] = None,
) -> logging.Logger:
    """
    设置彩色日志配置

    Args:
        level: 日志级别
        name: 日志器名称
        use_rich: RichHandler (True) or ANSI StreamHandler (False);
            None picks rich only when stdout is a terminal.

    Returns:
        配置好的日志器
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 避免重复添加处理器
    if logger.handlers:
        return logger

    if use_rich is None:
        use_rich = sys.stdout.isatty()

    handler = _make_rich_handler() if use_rich else _make_ansi_handler()
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


def get_colorful_logger(name: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """获取彩色日志器"""
    return setup_colorful_logging(level=level, name=name)
