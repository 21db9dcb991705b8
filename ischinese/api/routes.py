"""
API 路由定义
"""
from typing import Optional

from fastapi import APIRouter, HTTPException, status

from ischinese.api.schemas import (
    DetectRequest,
    DetectResponse,
    DetectResult,
    BatchDetectRequest,
    BatchDetectResponse,
    HealthResponse
)
from ischinese.core import classifier, chinese_detector
from ischinese.core.classifier import MAJORITY_THRESHOLD
from ischinese.config import settings
from ischinese.utils import get_logger

logger = get_logger("ischinese")
router = APIRouter()


def _detect(text: str, threshold: Optional[float] = None) -> DetectResult:
    """
    对单段文本执行全部判定

    每种占比只计算一次，多数判定由占比推出，空文本恒为 True
    """
    chinese_type, exclusive_ratio = chinese_detector.detect_chinese_type(text, threshold)
    chinese_ratio = classifier.chinese_ratio(text)
    simplified_ratio = classifier.simplified_ratio(text)
    traditional_ratio = classifier.traditional_ratio(text)
    empty = not text
    return DetectResult(
        is_chinese=empty or chinese_ratio > MAJORITY_THRESHOLD,
        is_simplified_chinese=empty or simplified_ratio > MAJORITY_THRESHOLD,
        is_traditional_chinese=empty or traditional_ratio > MAJORITY_THRESHOLD,
        is_pure_chinese=classifier.is_pure_chinese(text),
        is_pure_simplified_chinese=classifier.is_pure_simplified_chinese(text),
        is_pure_traditional_chinese=classifier.is_pure_traditional_chinese(text),
        chinese_ratio=chinese_ratio,
        simplified_ratio=simplified_ratio,
        traditional_ratio=traditional_ratio,
        chinese_type=chinese_type,
        exclusive_traditional_ratio=exclusive_ratio
    )


@router.get("/", response_model=HealthResponse)
async def root():
    """根路径 - 服务状态"""
    return HealthResponse()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """健康检查接口"""
    return HealthResponse()


@router.post("/detect", response_model=DetectResponse)
async def detect(request: DetectRequest):
    """
    中文检测接口

    返回多数判定、纯度判定、各类字符占比以及简繁判定结果
    """
    try:
        result = _detect(request.text, request.threshold)
        logger.info(
            f"Detected text ({len(request.text)} code points): "
            f"chinese={result.is_chinese}, type={result.chinese_type}"
        )
        return DetectResponse(result=result, length=len(request.text))

    except ValueError as e:
        logger.error(f"Validation error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Internal server error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}"
        )


@router.post("/detect/batch", response_model=BatchDetectResponse)
async def detect_batch(request: BatchDetectRequest):
    """批量中文检测接口"""
    try:
        results = [_detect(text, request.threshold) for text in request.texts]
        logger.info(f"Detected batch of {len(results)} texts")
        return BatchDetectResponse(results=results, total=len(results))

    except ValueError as e:
        logger.error(f"Validation error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Internal server error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}"
        )


@router.get("/config")
async def get_config():
    """获取当前配置信息"""
    dictionary = classifier.dictionary
    return {
        "variants_file": str(dictionary.source),
        "dictionary_size": {
            "simplified": len(dictionary.simplified),
            "traditional": len(dictionary.traditional)
        },
        "majority_threshold": MAJORITY_THRESHOLD,
        "traditional_ratio_threshold": settings.TRADITIONAL_RATIO_THRESHOLD,
        "max_text_length": settings.MAX_TEXT_LENGTH
    }
