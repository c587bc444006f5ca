"""로깅 설정 모듈"""

from pathlib import Path

from loguru import logger

from ..config import settings


def setup_logging(log_dir: Path | None = None, level: str | None = None) -> Path:
    """UI와 분리된 실행 로그를 파일로 저장

    Returns:
        로그 파일 경로
    """
    log_dir = Path(log_dir) if log_dir is not None else settings.LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "runtime.log"

    # 기본 stderr 핸들러 제거 (콘솔 출력 방지)
    logger.remove()

    # 파일 핸들러 추가 (rotation, retention 자동 지원)
    logger.add(
        log_path,
        format="{time:YYYY-MM-DD HH:mm:ss} {level} {name}: {message}",
        level=level or settings.LOG_LEVEL,
        rotation="5 MB",
        retention=5,
        encoding="utf-8",
    )
    logger.enable("cli_console")
    return log_path
