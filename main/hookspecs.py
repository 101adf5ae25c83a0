"""Hookspecs for form building."""

import pluggy

hookspec = pluggy.HookspecMarker("storefront")


@hookspec
def form_before_build(form, name):
    """
    Called before a form's fields are built.

    Implementations may add fields to form.fields or adjust form.initial. Fields
    added here can be replaced by the form's own build_form().

    Args:
    form (BaseForm): the form being built
    name (str): the unique name of the form
    """


@hookspec
def form_after_build(form, name):
    """
    Called once a form's own fields are built, before the standard hidden
    fields (success_url, error_message) are added.

    Args:
    form (BaseForm): the form being built
    name (str): the unique name of the form
    """
