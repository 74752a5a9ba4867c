from inspect import FullArgSpec, getfile, getfullargspec, getsourcelines
from os.path import basename
from re import sub
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    MAX_CONTENT_LENGTH,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


_EMAIL_PATTERN = r'([A-Za-z0-9._%+-])[A-Za-z0-9._%+-]*(@[A-Za-z0-9.-]+)'


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    lineno = getsourcelines(func)[1]
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def normalize_args_kwargs(
    func: Callable[..., Any], *args: Any, **kwargs: Any
) -> tuple[tuple[Any, ...], dict[Any, Any]]:
    if hasattr(func, '__wrapped__'):
        func = func.__wrapped__  # type: ignore
    full_arg_spec: FullArgSpec = getfullargspec(func)
    spec_args: list[str] = full_arg_spec.args

    if not full_arg_spec.varkw:
        kw_list: list[str] = spec_args + full_arg_spec.kwonlyargs
        kwargs = {k: v for k, v in kwargs.items() if k in kw_list}

    if not full_arg_spec.varargs and len(args) > len(spec_args):
        args = args[: len(spec_args)]

    return args, kwargs


def mask_sensitive(data: Any) -> Any:
    """Keep the first character and the domain of any email address."""
    try:
        data_str = str(data)
        masked = sub(_EMAIL_PATTERN, r'\1***\2', data_str)
        return data if data_str == masked else masked
    except Exception:
        return data


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return '********' if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(content: Any) -> Any:
    content_str = str(content)
    if len(content_str) <= MAX_CONTENT_LENGTH:
        return content
    return f'{content_str[:MAX_CONTENT_LENGTH]}... ({len(content_str)} chars)'
