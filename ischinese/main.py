"""
FastAPI 应用入口
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ischinese.api import router
from ischinese.api.schemas import ErrorResponse
from ischinese.config import settings
from ischinese.core import classifier
from ischinese.utils import get_logger

logger = get_logger("ischinese")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    应用生命周期管理器

    字典在导入 ischinese.core 时已经加载完成，这里只记录启动信息
    """
    dictionary = classifier.dictionary
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Server running at {settings.base_url}")
    logger.info(f"Variants file: {dictionary.source}")
    logger.info(
        f"Dictionary size: {len(dictionary.simplified)} simplified, "
        f"{len(dictionary.traditional)} traditional"
    )
    if settings.log_file:
        logger.info(f"Log file: {settings.log_file}")

    yield

    logger.info(f"Shutting down {settings.APP_NAME}")


def create_app() -> FastAPI:
    """
    创建并配置 FastAPI 应用

    Returns:
        配置好的 FastAPI 应用实例
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Classify text as Chinese, Simplified Chinese or Traditional Chinese",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    # 配置 CORS 中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    app.include_router(router)

    # 注册异常处理器
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request, exc: HTTPException):
        """HTTP异常处理器"""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error="HTTPException",
                detail=str(exc.detail),
                code=exc.status_code
            ).model_dump()
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc: Exception):
        """通用异常处理器"""
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="InternalServerError",
                detail="An internal server error occurred",
                code=500
            ).model_dump()
        )

    return app


# 创建应用实例
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ischinese.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
