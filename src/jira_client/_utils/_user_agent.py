from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

from .constants import PACKAGE_NAME, USER_AGENT_PRODUCT


@lru_cache(maxsize=1)
def package_version() -> str:
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def user_agent_value() -> str:
    return f"{USER_AGENT_PRODUCT}/{package_version()}"
