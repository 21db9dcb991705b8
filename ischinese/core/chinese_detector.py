"""
简繁体中文检测工具
用于判断文本中简体字和繁体字的占比
"""
from typing import Optional, Tuple

from ischinese.config import settings
from ischinese.core.classifier import Classifier, classifier as default_classifier


class ChineseDetector:
    """简繁体中文检测器"""

    def __init__(self, classifier: Optional[Classifier] = None):
        self.classifier = classifier or default_classifier

    def count_exclusive(self, text: str) -> Tuple[int, int]:
        """
        统计只属于一种字形的字符数量

        同时属于简繁两个集合或两者都不属于的字符不计入

        Returns:
            (简体字数量, 繁体字数量)
        """
        simplified_count = 0
        traditional_count = 0
        for char in text:
            cp = ord(char)
            is_simp = self.classifier.is_simplified_char(cp)
            is_trad = self.classifier.is_traditional_char(cp)
            if is_trad and not is_simp:
                traditional_count += 1
            elif is_simp and not is_trad:
                simplified_count += 1
        return simplified_count, traditional_count

    def detect_chinese_type(self, text: str, threshold: float = None) -> Tuple[str, float]:
        """
        检测文本是简体中文还是繁体中文

        Args:
            text: 要检测的文本
            threshold: 繁体字占比阈值，达到此值判定为繁体，默认使用配置

        Returns:
            ('simplified' | 'traditional', 繁体字占比)
        """
        if threshold is None:
            threshold = settings.TRADITIONAL_RATIO_THRESHOLD

        if not text:
            return 'simplified', 0.0

        simplified_count, traditional_count = self.count_exclusive(text)

        total_chinese = traditional_count + simplified_count
        if total_chinese == 0:
            # 没有识别出简繁体特征字符，默认简体
            return 'simplified', 0.0

        traditional_ratio = traditional_count / total_chinese

        if traditional_ratio >= threshold:
            return 'traditional', traditional_ratio
        else:
            return 'simplified', traditional_ratio

    def is_traditional(self, text: str, threshold: float = None) -> bool:
        """
        判断文本是否为繁体中文

        Args:
            text: 要检测的文本
            threshold: 繁体字占比阈值

        Returns:
            是否为繁体中文
        """
        chinese_type, _ = self.detect_chinese_type(text, threshold)
        return chinese_type == 'traditional'


chinese_detector = ChineseDetector()
