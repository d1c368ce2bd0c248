#!/usr/bin/env python3
"""
主应用入口
"""
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import load_settings
from .database import close_database, init_database
from .routes.book_routes import book_router

settings = load_settings()

# 配置日志
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# 创建FastAPI应用
app = FastAPI(
    title="Book Store API",
    description="书籍资源的增删改查接口",
    version="1.0.0"
)

# 配置CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(book_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """请求绑定失败统一返回400"""
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """未处理异常返回500，开发环境附带异常信息"""
    logger.error(f"请求处理异常 {request.method} {request.url.path}: {exc}", exc_info=exc)
    content = {"detail": "Internal Server Error"}
    if settings.is_development:
        content["error"] = repr(exc)
    return JSONResponse(status_code=500, content=content)


@app.on_event("startup")
async def startup_event():
    """应用启动事件"""
    logger.info(f"应用启动中... 运行环境: {settings.environment}")
    await init_database()
    logger.info("数据库连接就绪")


@app.on_event("shutdown")
async def shutdown_event():
    """应用关闭事件"""
    logger.info("应用关闭中...")
    await close_database()


@app.get("/health")
async def health_check():
    """健康检查接口"""
    return {"status": "healthy", "environment": settings.environment}


def run_server(host: str = "127.0.0.1", port: int = 8000):
    """运行服务器"""
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
