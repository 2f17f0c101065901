# site_splitter/processors/converters/__init__.py
"""
Converters Sub-package
======================
Export JSON 파일과 사이트별 분할 디렉토리 사이의 양방향 변환을 담당합니다.

Modules:
--------
1. site_entry.py
   - 사이트 항목의 구조 검사(필수 키: id, libs, compiledCss, options).
   - 파일 이름 변환(* : \\ / -> _), 순서 접두어 자릿수 계산.

2. export_splitter.py (ExportSplitter)
   - <name>.json -> <name>/ 디렉토리 (.json/.js/.css + userSettings.json).

3. export_combiner.py (ExportCombiner)
   - <dir>/ 디렉토리 -> gen-<dir>.json (파일 경로 문자열 순서로 재조립).
"""

from .export_splitter import ExportSplitter
from .export_combiner import ExportCombiner

__all__ = [
    "ExportSplitter",
    "ExportCombiner"
]
