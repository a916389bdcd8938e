"""
Vexination API - Main entry point.
Loads config, initializes instances, and starts the FastAPI service.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI  # type: ignore

from config.config import Config, load_config
from pkg.logger.logger import Logger, LoggerConfig
from pkg.minio.minio import MinioAdapter
from pkg.minio.type import MinIOConfig
from pkg.rwlock.rwlock import RWLock
from pkg.zstd.type import ZstdConfig
from pkg.zstd.zstd import Zstd
from internal.api.main import create_app
from internal.vex.type import Config as VexConfig
from internal.vex.usecase.new import New as NewVexUseCase


def build_logger(app_config: Config) -> Logger:
    return Logger(
        LoggerConfig(
            level=app_config.logging.level,
            enable_console=app_config.logging.enable_console,
            colorize=app_config.logging.colorize,
            service_name=app_config.logging.service_name,
        )
    )


def build_lifespan(app_config: Config, logger: Logger):
    """Lifespan that wires the gateway to MinIO once per process."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"========== Starting {app_config.logging.service_name} API service =========="
        )
        logger.info(f"API: {app_config.server.host}:{app_config.server.port}")

        storage = MinioAdapter(
            MinIOConfig(
                endpoint=app_config.minio.endpoint,
                access_key=app_config.minio.access_key,
                secret_key=app_config.minio.secret_key,
                bucket=app_config.minio.bucket,
                secure=app_config.minio.secure,
                region=app_config.minio.region or None,
            ),
            logger=logger,
        )
        if app_config.minio.create_bucket:
            await storage.ensure_bucket()

        codec = Zstd(ZstdConfig(level=app_config.compression.level))

        app.state.vex_usecase = NewVexUseCase(
            config=VexConfig(compression_level=app_config.compression.level),
            storage=storage,
            codec=codec,
            lock=RWLock(),
            logger=logger,
        )
        logger.info(
            f"Advisory storage ready: bucket={app_config.minio.bucket} "
            f"at {app_config.minio.endpoint}"
        )

        yield

        logger.info("========== Shutting down API service ==========")
        app.state.vex_usecase = None
        logger.info("========== API service stopped successfully ==========")

    return lifespan


def build_app(app_config: Config) -> FastAPI:
    logger = build_logger(app_config)
    return create_app(
        logger=logger,
        server_config=app_config.server,
        lifespan=build_lifespan(app_config, logger),
    )


def main() -> None:
    import uvicorn  # type: ignore

    try:
        app_config = load_config()
    except Exception as e:
        raise Exception(f"Error loading configuration: {e}") from e

    app = build_app(app_config)
    uvicorn.run(
        app,
        host=app_config.server.host,
        port=app_config.server.port,
        log_level=app.state.logger.config.level.value.lower(),
    )


# Run with: python -m commands.api.main
if __name__ == "__main__":
    main()
