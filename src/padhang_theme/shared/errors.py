ExtraInfoType = dict[str, str | None]


class ThemeError(Exception):
    """An error raised by the Padhang theme."""

    def __init__(self, message: str, extra_info: ExtraInfoType | None = None):
        msg = message
        if extra_info:
            msg += " (" + ", ".join([f"{key}: {value}" for key, value in extra_info.items() if value is not None]) + ")"
        super().__init__(msg)


class RenderArgumentError(ThemeError):
    """A render callback was called with arguments that violate its contract."""

    def __init__(self, callback: str, message: str | None = None, extra_info: ExtraInfoType | None = None):
        if not extra_info:
            extra_info = {}
        super().__init__(message="Invalid render arguments.", extra_info={"callback": callback, "message": message, **extra_info})


class HookError(ThemeError):
    """A hook registration error."""

    def __init__(self, hook_name: str, message: str):
        super().__init__(message=f"{hook_name}: {message}")


class TemplateRenderError(ThemeError):
    """A template failed to render."""

    def __init__(self, template: str, message: str | None = None):
        super().__init__(message="A template could not be rendered.", extra_info={"template": template, "message": message})
