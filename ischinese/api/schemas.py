"""
API 数据模型
定义请求和响应的数据结构
"""
from typing import List, Optional
from pydantic import BaseModel, Field, validator

from ischinese.config import settings


class DetectRequest(BaseModel):
    """中文检测请求模型"""

    text: str = Field(
        ...,
        max_length=settings.MAX_TEXT_LENGTH,
        description="要检测的文本"
    )
    threshold: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="简繁判定的繁体字占比阈值，默认使用服务配置"
    )


class BatchDetectRequest(BaseModel):
    """批量检测请求模型"""

    texts: List[str] = Field(..., min_length=1, description="要检测的文本列表")
    threshold: Optional[float] = Field(default=None, ge=0.0, le=1.0, description="繁体字占比阈值")

    @validator("texts")
    def validate_texts(cls, v):
        """验证每段文本的长度"""
        for text in v:
            if len(text) > settings.MAX_TEXT_LENGTH:
                raise ValueError(
                    f"each text must be at most {settings.MAX_TEXT_LENGTH} characters"
                )
        return v


class DetectResult(BaseModel):
    """单段文本的检测结果"""

    is_chinese: bool = Field(..., description="超过 50% 的字符为中文")
    is_simplified_chinese: bool = Field(..., description="超过 50% 的字符为简体中文")
    is_traditional_chinese: bool = Field(..., description="超过 50% 的字符为繁体中文")
    is_pure_chinese: bool = Field(..., description="全部字符为中文")
    is_pure_simplified_chinese: bool = Field(..., description="全部字符为简体中文")
    is_pure_traditional_chinese: bool = Field(..., description="全部字符为繁体中文")
    chinese_ratio: float = Field(..., description="中文字符占比")
    simplified_ratio: float = Field(..., description="简体字符占比")
    traditional_ratio: float = Field(..., description="繁体字符占比")
    chinese_type: str = Field(..., description="'simplified' 或 'traditional'")
    exclusive_traditional_ratio: float = Field(..., description="简繁特征字中繁体字的占比")


class DetectResponse(BaseModel):
    """中文检测响应模型"""

    success: bool = Field(True, description="是否成功")
    result: DetectResult = Field(..., description="检测结果")
    length: int = Field(..., description="文本码位数量")


class BatchDetectResponse(BaseModel):
    """批量检测响应模型"""

    success: bool = Field(True, description="是否成功")
    results: List[DetectResult] = Field(..., description="检测结果列表，与请求顺序一致")
    total: int = Field(..., description="文本数量")


class HealthResponse(BaseModel):
    """健康检查响应模型"""

    status: str = Field("healthy", description="服务状态")
    message: str = Field("IsChinese Service is running", description="状态消息")
    version: str = Field(settings.APP_VERSION, description="服务版本")


class ErrorResponse(BaseModel):
    """错误响应模型"""

    success: bool = Field(False, description="是否成功")
    error: str = Field(..., description="错误类型")
    detail: str = Field(..., description="错误详情")
    code: int = Field(..., description="错误代码")
