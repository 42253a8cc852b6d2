"""
utils/uploads.py

- 업로드 파일을 UPLOAD_DIR에 임시 저장/삭제하는 헬퍼
- 저장 파일명: <epoch-ms>-<원본 파일명>
"""

import logging
import os
import time
from pathlib import Path
from typing import BinaryIO

from services.exceptions import ValidationError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def sanitize_filename(name: str) -> str:
    # 경로 구분자 제거 (../../ 방지)
    return Path((name or "").replace("\\", "/")).name


def get_extension(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lower()


def check_extension(filename: str, allowed) -> str:
    ext = get_extension(filename)
    if ext not in allowed:
        raise ValidationError("Only CSV and Excel files are allowed")
    return ext


def save_upload_file(src: BinaryIO, filename: str, upload_dir: str, max_bytes: int) -> Path:
    """
    업로드 스트림을 디스크에 복사
    - max_bytes 초과 시 쓰던 파일을 지우고 ValidationError
    """
    dest_dir = Path(upload_dir)
    dest_dir.mkdir(parents=True, exist_ok=True)
    dest = dest_dir / f"{int(time.time() * 1000)}-{sanitize_filename(filename)}"

    total = 0
    src.seek(0)

    try:
        with dest.open("wb") as out:
            while True:
                chunk = src.read(CHUNK_SIZE)
                if not chunk:
                    break
                total += len(chunk)
                if total > max_bytes:
                    raise ValidationError(
                        f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB"
                    )
                out.write(chunk)
    except Exception:
        remove_file(dest)
        raise

    logger.debug("업로드 파일 저장: %s (%d bytes)", dest, total)
    return dest


def remove_file(path: Path) -> None:
    try:
        Path(path).unlink(missing_ok=True)
    except OSError as e:
        logger.warning("임시 파일 삭제 실패: %s (%s)", path, e)
