# site_splitter/utils/file_manager.py

import json
import os
from pathlib import Path
from typing import Any, Type
from site_splitter.config import Config
from site_splitter.errors import SiteSplitterError
from site_splitter.utils.logger import Log


class JsonHandler:
    """
    JSON / 텍스트 파일 입출력.
    읽기 실패는 호출 측이 지정한 예외 클래스로 감싸서 전달하고,
    쓰기는 파일을 닫고 디스크에 반영된 뒤에 반환합니다.
    """

    @staticmethod
    def read_json(filepath: Path, error_cls: Type[SiteSplitterError] = SiteSplitterError) -> Any:
        try:
            # utf-8-sig: BOM이 있는 파일(Windows 편집기)도 허용
            with open(filepath, 'r', encoding=Config.JSON_READ_ENCODING) as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise error_cls(f"JSON parsing failed ({filepath}): {e}") from e
        except UnicodeDecodeError as e:
            raise error_cls(f"Invalid {Config.ENCODING} text ({filepath}): {e}") from e
        except OSError as e:
            raise error_cls(f"Cannot read ({filepath}): {e}") from e

    @staticmethod
    def save_json(filepath: Path, data: Any, compact: bool = False) -> None:
        if compact:
            text = json.dumps(data, ensure_ascii=False, separators=Config.COMPACT_SEPARATORS)
        else:
            text = json.dumps(data, ensure_ascii=False, indent=Config.JSON_INDENT)
        JsonHandler.write_text(filepath, text)
        Log.trace(f"Saved: {filepath.name}")

    @staticmethod
    def read_text(filepath: Path) -> str:
        # newline='' keeps \r\n bodies byte-for-byte
        with open(filepath, 'r', encoding=Config.ENCODING, newline='') as f:
            return f.read()

    @staticmethod
    def write_text(filepath: Path, content: str) -> None:
        with open(filepath, 'w', encoding=Config.ENCODING, newline='') as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
