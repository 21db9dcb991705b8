"""
中文文本分类模块
判断文本是否为中文，以及是简体中文还是繁体中文
"""
from typing import Callable, Optional, Union
from pathlib import Path

from ischinese.config import settings
from ischinese.core.dictionary import VariantDictionary, load_dictionary
from ischinese.core.ranges import is_chinese_char
from ischinese.utils import get_logger

logger = get_logger("ischinese.classifier")

CharPredicate = Callable[[int], bool]

# 多数判定：占比严格大于该值
MAJORITY_THRESHOLD = 0.5


class Classifier:
    """基于简繁字典的中文分类器"""

    def __init__(self, dictionary: VariantDictionary, log_failed_chars: bool = None):
        """
        初始化分类器

        Args:
            dictionary: 简繁字典
            log_failed_chars: 是否以 DEBUG 级别输出判定失败的字符，默认使用配置
        """
        self.dictionary = dictionary
        self.log_failed_chars = (
            log_failed_chars if log_failed_chars is not None else settings.LOG_FAILED_CHARS
        )

    # ---- 单字判定 ----

    @staticmethod
    def is_chinese_char(cp: int) -> bool:
        return is_chinese_char(cp)

    def is_simplified_char(self, cp: int) -> bool:
        """
        判断码位是否可作为简体字

        简繁字典中都没有记录的中文字符（如标点）默认视为简体
        """
        if not is_chinese_char(cp):
            return False
        if self.dictionary.is_simplified(cp):
            return True
        if self.dictionary.is_traditional(cp):
            return False
        return True

    def is_traditional_char(self, cp: int) -> bool:
        """
        判断码位是否可作为繁体字

        简繁字典中都没有记录的中文字符默认视为繁体
        """
        if not is_chinese_char(cp):
            return False
        if self.dictionary.is_traditional(cp):
            return True
        if self.dictionary.is_simplified(cp):
            return False
        return True

    # ---- 多数判定：占比严格大于 50% ----

    def is_chinese(self, s: str) -> bool:
        """超过 50% 的字符为中文"""
        return self._majority(s, self.is_chinese_char)

    def is_simplified_chinese(self, s: str) -> bool:
        """超过 50% 的字符为简体中文"""
        return self._majority(s, self.is_simplified_char)

    def is_traditional_chinese(self, s: str) -> bool:
        """超过 50% 的字符为繁体中文"""
        return self._majority(s, self.is_traditional_char)

    # ---- 纯度判定：全部字符满足 ----

    def is_pure_chinese(self, s: str) -> bool:
        """全部字符为中文"""
        return self._pure(s, self.is_chinese_char)

    def is_pure_simplified_chinese(self, s: str) -> bool:
        """全部字符为简体中文"""
        return self._pure(s, self.is_simplified_char)

    def is_pure_traditional_chinese(self, s: str) -> bool:
        """全部字符为繁体中文"""
        return self._pure(s, self.is_traditional_char)

    # ---- 占比 ----

    def chinese_ratio(self, s: str) -> float:
        return self._ratio(s, self.is_chinese_char)

    def simplified_ratio(self, s: str) -> float:
        return self._ratio(s, self.is_simplified_char)

    def traditional_ratio(self, s: str) -> float:
        return self._ratio(s, self.is_traditional_char)

    def _ratio(self, s: str, predicate: CharPredicate) -> float:
        """
        计算满足判定的字符占比

        空字符串返回 1.0
        """
        total = 0
        matched = 0
        for ch in s:
            total += 1
            if predicate(ord(ch)):
                matched += 1
            elif self.log_failed_chars:
                logger.debug(f"Character failed {predicate.__name__}: {ch!r} (U+{ord(ch):04X})")

        if total == 0:
            return 1.0
        return matched / total

    def _majority(self, s: str, predicate: CharPredicate) -> bool:
        if not s:
            return True
        return self._ratio(s, predicate) > MAJORITY_THRESHOLD

    def _pure(self, s: str, predicate: CharPredicate) -> bool:
        for ch in s:
            if not predicate(ord(ch)):
                if self.log_failed_chars:
                    logger.debug(f"Character failed {predicate.__name__}: {ch!r} (U+{ord(ch):04X})")
                return False
        return True


def create_classifier(
    path: Union[str, Path, None] = None,
    log_failed_chars: Optional[bool] = None
) -> Classifier:
    """
    创建分类器（工厂函数）

    Args:
        path: 异体字数据文件路径，默认使用配置中的路径
        log_failed_chars: 是否输出判定失败的字符

    Returns:
        Classifier实例

    Raises:
        DictionaryLoadError: 数据文件读取失败
    """
    return Classifier(load_dictionary(path), log_failed_chars=log_failed_chars)


# 进程内共享的默认分类器，字典加载失败时导入即失败
classifier = create_classifier()
