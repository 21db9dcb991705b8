"""
配置管理模块
支持从环境变量和配置文件加载配置
.env 文件中的配置优先级高于默认值
"""
import sys
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类"""

    # 服务配置
    APP_NAME: str = "IsChinese Service"
    APP_VERSION: str = "1.0.0"
    HOST: str = "127.0.0.1"
    PORT: int = 8003
    DEBUG: bool = False

    # 字典配置
    VARIANTS_FILE: str = ""  # Unihan_Variants.txt 路径，留空则使用包内自带的数据文件
    UNIHAN_URL: str = "https://www.unicode.org/Public/UCD/latest/ucd/Unihan.zip"
    FETCH_TIMEOUT: int = 60  # 下载超时时间（秒）

    # 判定配置
    TRADITIONAL_RATIO_THRESHOLD: float = 0.3  # 繁体字占比阈值，超过此值判定为繁体
    MAX_TEXT_LENGTH: int = 100000

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DIR: str = ""  # 日志目录，留空则只输出到控制台
    LOG_FAILED_CHARS: bool = False  # 以 DEBUG 级别输出判定失败的字符

    # CORS 配置
    CORS_ORIGINS: list = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list = ["*"]
    CORS_ALLOW_HEADERS: list = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @property
    def BASE_DIR(self) -> Path:
        """包根目录"""
        return Path(__file__).parent.parent

    @property
    def DATA_DIR(self) -> Path:
        """数据目录"""
        return self.BASE_DIR / "data"

    @property
    def variants_path(self) -> Path:
        """Unihan 异体字数据文件路径"""
        if self.VARIANTS_FILE:
            return Path(self.VARIANTS_FILE)
        return self.DATA_DIR / "Unihan_Variants.txt"

    @property
    def log_file(self) -> Optional[Path]:
        """日志文件路径，未配置 LOG_DIR 时为 None"""
        if not self.LOG_DIR:
            return None
        return Path(self.LOG_DIR) / "ischinese.log"

    @property
    def base_url(self) -> str:
        """获取服务基础URL"""
        return f"http://{self.HOST}:{self.PORT}"

    def validate_and_setup(self):
        """验证配置并创建必要的目录"""
        if not self.LOG_DIR:
            return

        # 创建日志目录
        log_path = Path(self.LOG_DIR)
        try:
            log_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            print(f"错误: 无法创建日志目录 {log_path}: {e}")
            sys.exit(1)


# 创建全局配置实例
settings = Settings()
settings.validate_and_setup()
