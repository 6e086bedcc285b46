# bn_str/__about__.py

APP_NAME        = "bn-str"
APP_TITLE       = "Big Number Strings ⇆ Hex/Octal/Binary/Bytes"
AUTHOR          = "Wired Square"
COPYRIGHT_YEAR  = "2025"
COPYRIGHT       = f"© {COPYRIGHT_YEAR} {AUTHOR}"
HOMEPAGE        = "https://github.com/Wired-Square/bn-str"


__version__ = "0.1.0.dev1"

__all__ = [
    "__version__",
    "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT_YEAR", "COPYRIGHT", "HOMEPAGE",
]

