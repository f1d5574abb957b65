import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import config
from app.api.todo import router as todo_router
from app.service.todo_service import TodoStore

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)


class UTF8JSONResponse(JSONResponse):
    # 客户端要求 Content-Type 带上 charset
    media_type = "application/json; charset=utf-8"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用启动 / 关闭时执行"""
    logger.info("🚀 Todo-Backend 启动")
    yield
    app.state.store.clear()
    logger.info("👋 Todo-Backend 已关闭")


async def json_error_handler(request: Request, exc: RequestValidationError):
    # 请求体根本不是 JSON 时返回 400，字段类型不对仍然是 422
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        logger.warning(f"非法 JSON 请求体: {request.method} {request.url.path}")
        return UTF8JSONResponse(status_code=400, content={"detail": "请求体不是合法的 JSON"})
    return await request_validation_exception_handler(request, exc)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Todo-Backend",
        default_response_class=UTF8JSONResponse,
        lifespan=lifespan,
    )
    app.state.store = TodoStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, json_error_handler)

    # 注册路由
    app.include_router(todo_router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            logger.info(
                f"{request.method} {request.url.path} | 响应状态: {response.status_code} | 耗时: {process_time:.4f}s"
            )
            return response
        except Exception as e:
            logger.error(f"请求处理异常: {request.method} {request.url.path}: {e}")
            raise

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
