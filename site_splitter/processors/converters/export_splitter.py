# site_splitter/processors/converters/export_splitter.py
from pathlib import Path
from typing import Any, Dict, Optional
from site_splitter.config import Config
from site_splitter.errors import ExportReadError
from site_splitter.utils import JsonHandler, Log, log_lifecycle
from .site_entry import (
    check_user_data,
    prefix_width,
    strip_site_entry,
    url_to_file_name,
)


class ExportSplitter:
    """
    Export 파일(<name>.json) 하나를 사이트별 .json/.js/.css 파일 디렉토리로 분할합니다.
    """

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.io = JsonHandler()

    def _root(self) -> Path:
        return self.base_dir if self.base_dir is not None else Path.cwd()

    def run(self, file_name: str, apply_prefix: bool = False) -> Optional[Path]:
        """
        Convert an exported ``<file_name>.json`` into a folder of the same
        name. Read errors are logged and abort the run before anything is
        written; returns the output folder, or None on failure.
        """
        Log.section(f"Split: {file_name}{Config.JSON_SUFFIX}")
        try:
            data = self.load_export(file_name)
        except ExportReadError as e:
            Log.error(str(e))
            return None

        output_dir = self.save_as_files(data, file_name, apply_prefix)
        Log.success(f"{len(data['sites'])} sites written to {output_dir}")
        return output_dir

    def load_export(self, file_name: str) -> Dict[str, Any]:
        source = self._root() / f"{file_name}{Config.JSON_SUFFIX}"
        data = self.io.read_json(source, ExportReadError)

        is_valid, reason = check_user_data(data)
        if not is_valid:
            raise ExportReadError(f"Unexpected export shape ({source.name}): {reason}")
        return data

    @log_lifecycle
    def save_as_files(self, data: Dict[str, Any], folder_name: str, apply_prefix: bool = False) -> Path:
        output_dir = self._root() / folder_name
        output_dir.mkdir(parents=True, exist_ok=True)

        sites = data["sites"]
        width = prefix_width(len(sites))

        for idx, entry in enumerate(sites):
            base_name = url_to_file_name(entry["id"])
            if apply_prefix:
                base_name = f"{idx:0{width}d}{base_name}"

            self.io.save_json(output_dir / f"{base_name}{Config.JSON_SUFFIX}", strip_site_entry(entry))

            # 비어 있는 본문은 파일을 만들지 않음
            if entry.get("js"):
                self.io.write_text(output_dir / f"{base_name}{Config.JS_SUFFIX}", entry["js"])
            if entry.get("css"):
                self.io.write_text(output_dir / f"{base_name}{Config.CSS_SUFFIX}", entry["css"])

            Log.info(f"-> {base_name}")

        user_settings = {
            "libs": data["libs"],
            "settings": data["settings"],
        }
        self.io.save_json(output_dir / Config.settings_file(), user_settings)
        return output_dir
