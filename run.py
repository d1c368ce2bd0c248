#!/usr/bin/env python3
"""
启动脚本 - Book Store API
使用方法: python run.py
"""

import logging

import uvicorn

from bookstore.config import load_settings

settings = load_settings()

# 配置日志
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
)

# 设置特定模块的日志级别
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

if __name__ == "__main__":
    logging.info("=" * 60)
    logging.info("启动 Book Store API")
    logging.info(f"运行环境: {settings.environment}")
    logging.info(f"开发模式: {'已开启' if settings.is_development else '未开启'}")
    logging.info("=" * 60)

    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        reload_dirs=["bookstore"] if settings.is_development else None,
    )
