"""
简繁字典构建模块
从 Unihan_Variants.txt 中读取 kSimplifiedVariant / kTraditionalVariant 记录，
生成简体字集合与繁体字集合
"""
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Set, Union

from ischinese.config import settings
from ischinese.core.unicode_parser import parse_unicode_string
from ischinese.utils import get_logger

logger = get_logger("ischinese.dictionary")

COMMENT_PREFIX = "#"
SIMPLIFIED_VARIANT = "kSimplifiedVariant"
TRADITIONAL_VARIANT = "kTraditionalVariant"


class DictionaryLoadError(RuntimeError):
    """数据文件无法打开或读取"""


@dataclass(frozen=True)
class VariantDictionary:
    """不可变的简繁字典"""

    simplified: FrozenSet[int]
    traditional: FrozenSet[int]
    source: Optional[Path] = None

    def is_simplified(self, cp: int) -> bool:
        return cp in self.simplified

    def is_traditional(self, cp: int) -> bool:
        return cp in self.traditional


def _add_code_points(fields: Iterable[str], target: Set[int]) -> None:
    """解析码位字段并加入集合，无法解析的字段直接丢弃"""
    for field in fields:
        try:
            target.add(parse_unicode_string(field))
        except ValueError:
            logger.debug(f"Skipping malformed code point field: {field!r}")


def build_dictionary(
    simplified: Set[int],
    traditional: Set[int],
    path: Union[str, Path, None] = None
) -> None:
    """
    逐行读取异体字数据文件，填充调用方传入的两个集合

    kSimplifiedVariant: 源字为繁体，目标字为简体
    kTraditionalVariant: 源字为简体，目标字为繁体

    Args:
        simplified: 简体字集合（原地修改）
        traditional: 繁体字集合（原地修改）
        path: 数据文件路径，默认使用配置中的路径

    Raises:
        DictionaryLoadError: 文件不存在、无法读取或读取过程中出错
    """
    path = Path(path) if path is not None else settings.variants_path

    try:
        with open(path, encoding="utf-8") as f:
            for line in f:
                if line.startswith(COMMENT_PREFIX):
                    continue

                fields = line.split()
                if len(fields) < 3:
                    continue

                tag = fields[1]
                if tag == SIMPLIFIED_VARIANT:
                    _add_code_points(fields[:1], traditional)
                    _add_code_points(fields[2:], simplified)
                elif tag == TRADITIONAL_VARIANT:
                    _add_code_points(fields[:1], simplified)
                    _add_code_points(fields[2:], traditional)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read variants file {path}: {str(e)}")
        raise DictionaryLoadError(f"Error reading variants file {path}: {str(e)}") from e


def load_dictionary(path: Union[str, Path, None] = None) -> VariantDictionary:
    """
    构建并冻结简繁字典

    Args:
        path: 数据文件路径，默认使用配置中的路径

    Returns:
        VariantDictionary 实例

    Raises:
        DictionaryLoadError: 数据文件读取失败
    """
    path = Path(path) if path is not None else settings.variants_path

    simplified: Set[int] = set()
    traditional: Set[int] = set()
    build_dictionary(simplified, traditional, path)

    logger.info(
        f"Loaded variants dictionary from {path}: "
        f"{len(simplified)} simplified, {len(traditional)} traditional"
    )
    return VariantDictionary(
        simplified=frozenset(simplified),
        traditional=frozenset(traditional),
        source=path
    )
