# site_splitter/utils/decorators.py

import time
import functools
from typing import Callable, Any
from site_splitter.utils.logger import Log


def measure_time(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start_time
            Log.performance(f"'{func.__name__}' took {elapsed:.4f} seconds")
    return wrapper


def log_lifecycle(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        class_name = ""
        if args and hasattr(args[0], '__dict__'):
            class_name = f"{args[0].__class__.__name__}."

        Log.trace(f"Starting: {class_name}{func.__name__}")
        result = func(*args, **kwargs)
        Log.trace(f"Finished: {class_name}{func.__name__}")
        return result
    return wrapper
