"""
Processors Package
==================
변환 파이프라인의 핵심 로직을 제공하는 패키지입니다.

Sub-packages:
-------------
1. converters
   - Export 파일 분할(Split)과 디렉토리 결합(Combine)을 담당합니다.
   - 주요 모듈: export_splitter, export_combiner, site_entry
"""

# 사용 예: from site_splitter.processors import ExportSplitter, ExportCombiner

from .converters import ExportSplitter, ExportCombiner

__all__ = [
    "ExportSplitter",
    "ExportCombiner"
]
