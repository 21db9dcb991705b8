"""
核心业务逻辑模块
"""
from .unicode_parser import parse_unicode_string
from .dictionary import (
    DictionaryLoadError,
    VariantDictionary,
    build_dictionary,
    load_dictionary
)
from .ranges import CHINESE_RANGES, is_chinese_char
from .classifier import Classifier, create_classifier, classifier
from .chinese_detector import ChineseDetector, chinese_detector

__all__ = [
    "parse_unicode_string",
    "DictionaryLoadError",
    "VariantDictionary",
    "build_dictionary",
    "load_dictionary",
    "CHINESE_RANGES",
    "is_chinese_char",
    "Classifier",
    "create_classifier",
    "classifier",
    "ChineseDetector",
    "chinese_detector",
]
