"""
Unihan 数据下载模块
从 unicode.org 下载 Unihan.zip 并解压出 Unihan_Variants.txt
"""
import sys
from io import BytesIO
from pathlib import Path
from typing import Optional, Union
from zipfile import BadZipFile, ZipFile

import requests

from ischinese.config import settings
from ischinese.utils import get_logger

logger = get_logger("ischinese.fetcher")

VARIANTS_MEMBER = "Unihan_Variants.txt"


def fetch_variants_file(
    dest: Union[str, Path, None] = None,
    url: Optional[str] = None,
    timeout: Optional[int] = None
) -> Path:
    """
    下载 Unihan 数据包并写出异体字数据文件

    Args:
        dest: 输出文件路径，默认使用配置中的 variants_path
        url: Unihan.zip 地址，默认使用配置
        timeout: 请求超时时间（秒）

    Returns:
        写出的文件路径

    Raises:
        RuntimeError: 下载失败或压缩包中没有异体字数据
    """
    dest = Path(dest) if dest is not None else settings.variants_path
    url = url or settings.UNIHAN_URL
    timeout = timeout or settings.FETCH_TIMEOUT

    logger.info(f"Downloading {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Failed to download {url}: {str(e)}")
        raise RuntimeError(f"Error downloading Unihan data: {str(e)}") from e

    try:
        with ZipFile(BytesIO(response.content)) as archive:
            if VARIANTS_MEMBER not in archive.namelist():
                raise RuntimeError(f"{VARIANTS_MEMBER} not found in {url}")
            data = archive.read(VARIANTS_MEMBER)
    except BadZipFile as e:
        raise RuntimeError(f"Invalid Unihan archive from {url}: {str(e)}") from e

    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_bytes(data)
    logger.info(f"Wrote {len(data)} bytes to {dest}")
    return dest


if __name__ == "__main__":
    target = sys.argv[1] if len(sys.argv) > 1 else None
    path = fetch_variants_file(target)
    print(f"✓ 异体字数据文件: {path}")
