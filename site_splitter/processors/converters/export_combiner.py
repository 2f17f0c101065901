# site_splitter/processors/converters/export_combiner.py
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from site_splitter.config import Config
from site_splitter.errors import SettingsFileError, SiteFileError
from site_splitter.utils import JsonHandler, Log, log_lifecycle
from .site_entry import assemble_site_entry, check_site_entry


class ExportCombiner:
    """
    분할된 디렉토리를 다시 하나의 Export 파일(gen-<dir>.json)로 결합합니다.
    모든 읽기가 끝난 뒤에만 결과 파일을 씁니다.
    """

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.io = JsonHandler()

    def _root(self) -> Path:
        return self.base_dir if self.base_dir is not None else Path.cwd()

    def run(self, folder_name: str) -> Path:
        Log.section(f"Combine: {folder_name}")
        export_data = self.combine(folder_name)

        output_path = self._root() / f"{Config.OUTPUT_PREFIX}{Path(folder_name).name}{Config.JSON_SUFFIX}"
        self.io.save_json(output_path, export_data, compact=True)
        Log.success(f"{len(export_data['sites'])} sites written to {output_path.name}")
        return output_path

    def combine(self, folder_name: str) -> Dict[str, Any]:
        folder = self._root() / folder_name
        if not folder.is_dir():
            raise SiteFileError(f"Directory not found: {folder}")

        sites = self.build_sites(self.collect_site_files(folder))
        user_settings = self.load_settings(folder)
        return {**user_settings, "sites": sites}

    @log_lifecycle
    def collect_site_files(self, folder: Path) -> List[Tuple[Path, Dict[str, Any]]]:
        json_paths = []

        for filepath in folder.rglob(f"*{Config.JSON_SUFFIX}"):
            if not filepath.is_file():
                continue

            data = self.io.read_json(filepath, SiteFileError)
            is_valid, reason = check_site_entry(data)
            if is_valid:
                json_paths.append((filepath, data))
            else:
                Log.trace(f"Skipped '{filepath.name}': {reason}")

        # 접두어가 고정 폭이므로 문자열 정렬 == 원래 순서
        json_paths.sort(key=lambda pair: str(pair[0]))
        return json_paths

    def build_sites(self, json_paths: List[Tuple[Path, Dict[str, Any]]]) -> List[Dict[str, Any]]:
        sites = []
        for filepath, stripped in json_paths:
            js_path = filepath.with_suffix(Config.JS_SUFFIX)
            css_path = filepath.with_suffix(Config.CSS_SUFFIX)

            js = self.io.read_text(js_path) if js_path.is_file() else ""
            css = self.io.read_text(css_path) if css_path.is_file() else ""
            sites.append(assemble_site_entry(stripped, js=js, css=css))
        return sites

    def load_settings(self, folder: Path) -> Dict[str, Any]:
        settings_path = folder / Config.settings_file()
        user_settings = self.io.read_json(settings_path, SettingsFileError)
        if not isinstance(user_settings, dict):
            raise SettingsFileError(f"Expected an object in {settings_path.name}")
        return user_settings
