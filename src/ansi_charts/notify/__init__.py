"""Toast notifications."""

from ansi_charts.notify.toast import (
    Toast,
    ToastType,
    show_error,
    show_info,
    show_success,
    show_warning,
)

__all__ = ["Toast", "ToastType", "show_error", "show_info", "show_success", "show_warning"]
