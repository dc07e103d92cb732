import contextlib

with contextlib.suppress(Exception):
    import os

    from beartype import BeartypeConf
    from beartype.claw import beartype_all, beartype_this_package

    from .app.config import BEARTYPE_ALL_ENV, BEARTYPE_THIS_PACKAGE_ENV

    if os.environ.get(BEARTYPE_THIS_PACKAGE_ENV, "0") == "1":
        beartype_this_package(conf=BeartypeConf(is_pep484_tower=True))
    if os.environ.get(BEARTYPE_ALL_ENV, "0") == "1":
        beartype_all(conf=BeartypeConf(is_pep484_tower=True, violation_type=UserWarning))
from .either import Either, Failure, Success, fail, succeed

__version__ = "0.1.0"

__all__: list[str] = ["Either", "Failure", "Success", "__version__", "fail", "succeed"]
