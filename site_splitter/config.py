# site_splitter/config.py

class Config:
    """분할/결합 작업 전체에서 사용되는 파일 이름 규칙 및 상수 정의"""

    # 인코딩 설정
    ENCODING = "utf-8"
    JSON_READ_ENCODING = "utf-8-sig"

    # 파일 확장자
    JSON_SUFFIX = ".json"
    JS_SUFFIX = ".js"
    CSS_SUFFIX = ".css"

    # 공용 설정 파일 (libs, settings 보관)
    SETTINGS_FILE_NAME = "userSettings"

    # 결합 결과 파일 접두어: gen-<dir>.json
    OUTPUT_PREFIX = "gen-"

    # JSON 출력 형식
    JSON_INDENT = "\t"
    COMPACT_SEPARATORS = (",", ":")

    # 순서 보존용 숫자 접두어 최소 자릿수 (000, 001, ...)
    MIN_PREFIX_WIDTH = 3

    # 파일 이름으로 쓸 수 없는 문자 (* : \ /)
    UNSAFE_FILE_CHARS = r"[*:\\/]"
    SAFE_CHAR = "_"

    @classmethod
    def settings_file(cls) -> str:
        return f"{cls.SETTINGS_FILE_NAME}{cls.JSON_SUFFIX}"
