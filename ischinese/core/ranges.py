"""
中文字符码位范围
"""
from typing import List, Tuple

# (起始码位, 结束码位)，两端均包含
CHINESE_RANGES: List[Tuple[int, int]] = [
    # https://en.wikipedia.org/wiki/CJK_Unified_Ideographs
    (0x4E00, 0x9FFC),  # CJK Unified Ideographs
    (0x3400, 0x4DBF),  # CJK Unified Ideographs Extension A
    (0x20000, 0x2A6DD),  # CJK Unified Ideographs Extension B
    (0x2A700, 0x2B734),  # CJK Unified Ideographs Extension C
    (0x2B740, 0x2B81D),  # CJK Unified Ideographs Extension D
    (0x2B820, 0x2CEA1),  # CJK Unified Ideographs Extension E
    (0x2CEB0, 0x2EBE0),  # CJK Unified Ideographs Extension F
    (0x30000, 0x3134F),  # CJK Unified Ideographs Extension G
    (0xFA0E, 0xFA0F),  # CJK Compatibility Ideographs
    (0xFA11, 0xFA11),
    (0xFA13, 0xFA14),
    (0xFA1F, 0xFA1F),
    (0xFA21, 0xFA21),
    (0xFA23, 0xFA24),
    (0xFA27, 0xFA29),
    (0x3300, 0x33FF),  # 其他非统一汉字
    (0xFE30, 0xFE4F),
    (0xF900, 0xFAFF),
    (0x2F800, 0x2FA1F),
    # https://en.wikipedia.org/wiki/CJK_Symbols_and_Punctuation
    (0x3000, 0x303F),
    # https://en.wikipedia.org/wiki/Chinese_punctuation
    (0xFF0C, 0xFF0C),  # ，
    (0xFF01, 0xFF01),  # ！
    (0xFF1F, 0xFF1F),  # ？
    (0xFF1A, 0xFF1B),  # ：；
    (0xFF08, 0xFF09),  # （）
    (0xFF3B, 0xFF3B),  # ［
    (0xFF3D, 0xFF3D),  # ］
    (0x3010, 0x3011),  # 【】
]


def is_chinese_char(cp: int) -> bool:
    """码位是否落在任一中文范围内"""
    for start, end in CHINESE_RANGES:
        if start <= cp <= end:
            return True
    return False
