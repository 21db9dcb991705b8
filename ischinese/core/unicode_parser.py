"""
Unicode 码位字符串解析
将 Unihan 数据中的 "U+XXXX" 形式解析为整数码位
"""
import binascii

UNICODE_STRING_PREFIX = "U+"

# 码位按 4 字节（8 个十六进制数字）解码
_HEX_WIDTH = 8


def parse_unicode_string(s: str) -> int:
    """
    解析码位字符串，例如 "U+3469" 或 "2966A"

    前缀 "U+" 可选，剩余部分左侧补零至 8 位十六进制，
    按大端无符号 32 位整数解码。

    Args:
        s: 码位字符串

    Returns:
        码位整数值（可能超出 U+10FFFF）

    Raises:
        ValueError: 长度超过 8 位或包含非十六进制字符
    """
    if s.startswith(UNICODE_STRING_PREFIX):
        s = s[len(UNICODE_STRING_PREFIX):]

    if len(s) > _HEX_WIDTH:
        raise ValueError(f"invalid unicode: {s!r}")

    raw = binascii.unhexlify(s.rjust(_HEX_WIDTH, "0"))
    return int.from_bytes(raw, "big")
