# site_splitter/utils/__init__.py
"""
Utilities Package
=================
분할(Split)/결합(Combine) 로직과 독립적으로 동작하는 공통 보조 기능을 제공하는 패키지입니다.

포함된 모듈 (Modules):
----------------------
1. file_manager.py
   - JsonHandler: JSON/텍스트 파일 읽기/쓰기, 파싱 에러를 도메인 예외로 변환.

2. logger.py
   - Log: ANSI Escape Code를 활용한 컬러 콘솔 로깅 (Info, Success, Error, Warning, Trace 등).

3. decorators.py
   - measure_time: 함수 실행 시간 측정 및 성능 로깅.
   - log_lifecycle: 함수 호출의 시작과 끝을 추적(Trace)하여 로깅.
"""

from .file_manager import JsonHandler
from .logger import Log
from .decorators import measure_time, log_lifecycle

__all__ = [
    "JsonHandler",
    "Log",
    "measure_time",
    "log_lifecycle"
]
