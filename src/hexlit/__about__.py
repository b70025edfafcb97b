# hexlit/__about__.py

APP_NAME        = "hexlit"
APP_TITLE       = "Hex Literal ⇒ Bytes Decoder"
AUTHOR          = "Wired Square"
COPYRIGHT_YEAR  = "2025"
COPYRIGHT       = f"© {COPYRIGHT_YEAR} {AUTHOR}"
HOMEPAGE        = "https://github.com/Wired-Square/hexlit"


__version__ = "0.1.0"

__all__ = [
    "__version__",
    "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT_YEAR", "COPYRIGHT", "HOMEPAGE",
    "about_text",
]

def about_text() -> str:
    return (
        f"{APP_TITLE}\n"
        f"Version {__version__}\n"
        f"{COPYRIGHT}\n"
        f"{HOMEPAGE}"
    )
