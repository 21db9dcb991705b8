"""
ischinese - 判断文本是否为中文，以及简体/繁体

多数判定（超过 50% 的字符满足）：
    is_chinese, is_simplified_chinese, is_traditional_chinese
纯度判定（全部字符满足）：
    is_pure_chinese, is_pure_simplified_chinese, is_pure_traditional_chinese
"""
from ischinese.core import (
    Classifier,
    ChineseDetector,
    DictionaryLoadError,
    VariantDictionary,
    classifier,
    create_classifier,
    load_dictionary
)

__version__ = "1.0.0"

is_chinese = classifier.is_chinese
is_simplified_chinese = classifier.is_simplified_chinese
is_traditional_chinese = classifier.is_traditional_chinese
is_pure_chinese = classifier.is_pure_chinese
is_pure_simplified_chinese = classifier.is_pure_simplified_chinese
is_pure_traditional_chinese = classifier.is_pure_traditional_chinese

__all__ = [
    "is_chinese",
    "is_simplified_chinese",
    "is_traditional_chinese",
    "is_pure_chinese",
    "is_pure_simplified_chinese",
    "is_pure_traditional_chinese",
    "Classifier",
    "ChineseDetector",
    "DictionaryLoadError",
    "VariantDictionary",
    "classifier",
    "create_classifier",
    "load_dictionary",
]
