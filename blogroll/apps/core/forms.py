"""Core form utilities for pages rendered inside the Django admin."""

from django import forms

# Admin stylesheet classes per widget type (see django/contrib/admin/static/admin/css/forms.css)
ADMIN_WIDGET_CLASSES = {
    forms.URLInput: "vURLField",
    forms.TextInput: "vTextField",
    forms.Textarea: "vLargeTextField",
}


class AdminStyledFormMixin:
    """Give plain form widgets the admin's own input classes.

    Forms on custom admin pages don't go through ModelAdmin, so their inputs
    miss the sizing the admin applies to model forms. Classes already on a
    widget are kept.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            widget = field.widget
            for widget_type, css_class in ADMIN_WIDGET_CLASSES.items():
                if isinstance(widget, widget_type):
                    classes = widget.attrs.get("class", "").split()
                    if css_class not in classes:
                        widget.attrs["class"] = " ".join([*classes, css_class])
                    break
