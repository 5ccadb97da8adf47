"""
database/db.py

- JSON 파일 한 개를 문서 DB 로 사용하는 저장소 어댑터
- load()  : 파일 전체를 읽어 Document 로 반환 (읽기/파싱 실패 시 시드 데이터로 대체, 예외 없음)
- load_with_status() : load() 와 같고, 시드로 대체했는지 여부를 함께 반환
- save()  : Document 전체를 2칸 들여쓰기 JSON 으로 덮어쓰기 (실패 시 StorageError)
- ensure_initialized() : 파일이 없으면 시드 데이터 기록
- locked() : 읽기-수정-쓰기 구간을 감싸는 문서 단위 잠금
"""

import json
import logging
import os
import stat
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from config.settings import settings                # ✅ 환경변수 설정 파일 불러오기
from database.seed import initial_document
from models.document import Document
from services.errors import StorageError

logger = logging.getLogger(__name__)

DEFAULT_FILE_MODE = 0o644


class JsonDocumentStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.RLock()

    # ✅ [READ] 문서 전체 읽기 (시드 대체 여부를 함께 반환)
    def load_with_status(self) -> Tuple[Document, bool]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            return Document.model_validate(data), False
        except (OSError, ValueError, PydanticValidationError) as e:
            # 파일은 건드리지 않고 메모리상의 시드 문서만 반환
            logger.error(f"데이터베이스 읽기 실패, 시드 데이터 사용: {self.path} ({e})")
            return Document.model_validate(initial_document()), True

    def load(self) -> Document:
        document, _ = self.load_with_status()
        return document

    # ✅ [WRITE] 문서 전체 쓰기
    def save(self, document: Document) -> None:
        payload = json.dumps(document.model_dump(mode="json"), ensure_ascii=False, indent=2)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            # mkstemp 는 0600 으로 만들기 때문에 기존 파일 권한(없으면 0644)을 적용
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error(f"데이터베이스 쓰기 실패: {self.path} ({e})")
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise StorageError(f"Failed to save database: {e.strerror or e}") from e

    def _file_mode(self) -> int:
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            return DEFAULT_FILE_MODE

    # ✅ [INIT] 파일이 없을 때만 시드 데이터 기록
    def ensure_initialized(self) -> None:
        with self._lock:
            if self.path.exists():
                return
            self.save(Document.model_validate(initial_document()))
            logger.info(f"시드 데이터로 데이터베이스 초기화: {self.path}")

    @contextmanager
    def locked(self) -> Iterator[Document]:
        """잠금을 잡은 상태에서 최신 문서를 넘겨준다. 저장은 호출부에서 save() 로.

        기존 파일을 읽지 못해 시드로 대체된 경우에는 변경을 막는다
        (시드 + 변경분으로 실제 파일을 덮어쓰지 않도록).
        """
        with self._lock:
            document, fell_back = self.load_with_status()
            if fell_back and self.path.exists():
                raise StorageError("Database file is unreadable; refusing to overwrite it")
            yield document


# ✅ 설정값(DB_FILE) 기준 기본 저장소
store = JsonDocumentStore(settings.DB_FILE)


def get_store() -> JsonDocumentStore:
    return store
