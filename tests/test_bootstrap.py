"""Tests for the Bootstrap decorator."""

import logging

import pytest


# ---- construction -----------------------------------------------------------

def test_bootstrap_version_3_accepted():
    """Test version 3 in its int and string forms."""
    from html_formgen.decorators.bootstrap import Bootstrap

    assert Bootstrap(version=3).version == 3
    assert Bootstrap(version="3.3.7").version == "3.3.7"
    assert Bootstrap(version=3).is_deep()


def test_bootstrap_unsupported_version_raises():
    """Test other versions are refused at construction."""
    from html_formgen.decorators.bootstrap import Bootstrap
    from html_formgen.exceptions import ConfigurationError

    with pytest.raises(ConfigurationError):
        Bootstrap(version=4)
    with pytest.raises(ConfigurationError):
        Bootstrap(version="latest")


def test_bootstrap_missing_version_warns(caplog):
    """Test a missing version is logged as warning, not raised."""
    from html_formgen.decorators.bootstrap import Bootstrap

    with caplog.at_level(logging.WARNING, logger="html_formgen"):
        decorator = Bootstrap()

    assert decorator.version is None
    assert "version of Bootstrap" in caplog.text


def test_bootstrap_version_from_config(caplog):
    """Test the configured version is used when none is given."""
    from html_formgen.decorators.bootstrap import Bootstrap
    from html_formgen.protocols import FormGenConfig, set_form_config

    set_form_config(FormGenConfig(bootstrap_version=3))
    with caplog.at_level(logging.WARNING, logger="html_formgen"):
        decorator = Bootstrap()

    assert decorator.version == 3
    assert caplog.text == ""


# ---- classification ---------------------------------------------------------

def test_is_button():
    """Test button classification for elements and non-elements."""
    from html_formgen.decorators.bootstrap import is_button
    from html_formgen.elements import Button, Input, Select

    assert is_button(Button("Go"))
    assert is_button(Input("go", input_type="submit"))
    assert is_button(Input("go", input_type="reset"))
    assert is_button(Input("a", attrs={"class": "btn"}))
    assert is_button(Select("a", options={"btn": "primary"}))
    assert is_button(Input("a", options={"btn-style": "link"}))

    assert not is_button(Input("a"))
    assert not is_button("<button>Go</button>")
    assert not is_button(None)


def test_button_classes(decorate):
    """Test button style tokens expand to btn-<token> classes."""
    from html_formgen.elements import Button

    button = decorate(Button("Send", options={"btn": "primary success"}, attrs={"type": "submit"}))
    assert button.render() == '<button class="btn btn-primary btn-success" type="submit">Send</button>'

    default = decorate(Button("Cancel"))
    assert default.get_classes() == ["btn", "btn-default"]


def test_button_style_reflects_option_changes(decorate):
    """Test the style classes follow the btn option at render time."""
    from html_formgen.elements import Button

    button = decorate(Button("Delete"))
    button.set_option("btn", "danger lg")
    assert button.get_classes() == ["btn", "btn-danger", "btn-lg"]


def test_submit_input_is_button_not_form_control(decorate):
    """Test submit inputs get button classes instead of form-control."""
    from html_formgen.elements import Input

    element = decorate(Input("go", attrs={"id": "go", "value": "Go"}, input_type="submit"))
    assert element.get_classes() == ["btn", "btn-default"]
    assert "form-control" not in element.render()
    assert not element.has_component("input-group")


@pytest.mark.parametrize("element_id, kwargs", [
    ("input", {}),
    ("input", {"input_type": "email"}),
    ("textarea", {}),
    ("select", {"items": ["x"]}),
])
def test_form_control_class(decorate, element_id, kwargs):
    """Test text-like controls get form-control."""
    from html_formgen.elements import get_element_class

    element = decorate(get_element_class(element_id)("a", **kwargs))
    assert element.has_class("form-control")


@pytest.mark.parametrize("input_type", ["checkbox", "radio"])
def test_checkable_inputs_have_no_form_control(decorate, input_type):
    """Test checkboxes and radios never get form-control."""
    from html_formgen.elements import Input

    element = decorate(Input("a", input_type=input_type))
    assert not element.has_class("form-control")
    assert "form-control" not in element.render()


def test_grid_helpers():
    """Test grid parsing and column offsets."""
    from html_formgen.decorators.bootstrap import parse_grid, offset_class

    assert parse_grid(["col-sm-2", "col-sm-10"]) == ("col-sm-2", "col-sm-10")
    assert parse_grid({"label": "col-md-3", "control": "col-md-9"}) == ("col-md-3", "col-md-9")
    assert parse_grid(None) is None
    assert parse_grid("col-sm-2") is None
    assert offset_class("col-sm-2") == "col-sm-offset-2"
    assert offset_class("col-xs-12 col-md-4") == "col-xs-offset-12 col-md-offset-4"


# ---- render assembly --------------------------------------------------------

def test_label_control_and_help(decorate):
    """Test a labeled text input with help text."""
    from html_formgen.elements import Input

    element = decorate(Input("name", options={"container": True, "label": "Name", "help": "Enter full name"},
                             attrs={"id": "name"}))

    assert element.render() == (
        '<div class="form-group">'
        '<label class="control-label" for="name">Name</label>'
        '<input class="form-control" type="text" id="name" name="name">'
        '<span class="help-block">Enter full name</span>'
        '</div>'
    )


def test_render_is_idempotent(decorate):
    """Test rendering an unchanged element twice gives identical markup."""
    from html_formgen.elements import Input

    element = decorate(Input("price", options={"label": "Price", "prepend": "$", "append": ".00",
                                               "grid": ("col-sm-2", "col-sm-10"), "help": "Net"}))
    assert element.render() == element.render()


def test_error_state_reflected_without_redecoration(decorate):
    """Test setting an error between renders adds has-error and the error block."""
    from html_formgen.elements import Input

    element = decorate(Input("name", options={"label": "Name"}, attrs={"id": "name"}))
    before = element.render()
    assert "has-error" not in before

    element.set_error("Name is required")
    assert element.render() == (
        '<div class="form-group has-error">'
        '<label class="control-label" for="name">Name</label>'
        '<input class="form-control" type="text" id="name" name="name">'
        '<span class="help-block error">Name is required</span>'
        '</div>'
    )

    element.set_error(None)
    assert element.render() == before


def test_hidden_input_has_no_label(decorate):
    """Test hidden inputs never get a label component."""
    from html_formgen.elements import Input

    element = decorate(Input("token", options={"label": "Token"}, attrs={"id": "token"},
                             input_type="hidden"))
    assert element.render() == '<input class="form-control" type="hidden" id="token" name="token">'

    element.set_option("container", True)
    html = element.render()
    assert html.startswith('<div class="form-group">')
    assert "<label" not in html
    assert not element.has_component("label")


def test_grid_with_label(decorate):
    """Test a grid puts the label and control in columns."""
    from html_formgen.elements import Input

    element = decorate(Input("email", options={"label": "Email", "grid": ("col-sm-2", "col-sm-10")},
                             attrs={"id": "email"}))

    assert element.render() == (
        '<div class="form-group">'
        '<label class="control-label col-sm-2" for="email">Email</label>'
        '<div class="col-sm-10">'
        '<input class="form-control" type="text" id="email" name="email">'
        '</div>'
        '</div>'
    )


def test_grid_offset_with_label_inside(decorate):
    """Test the control column is offset when the label is inside."""
    from html_formgen.elements import Input

    element = decorate(Input("remember", "Remember me",
                             options={"label": "inside", "grid": ["col-sm-2", "col-sm-10"]},
                             attrs={"id": "remember"}, input_type="checkbox"))

    assert element.render() == (
        '<div class="form-group">'
        '<div class="col-sm-offset-2 col-sm-10">'
        '<label for="remember"><input type="checkbox" id="remember" name="remember"> Remember me</label>'
        '</div>'
        '</div>'
    )


def test_grid_offset_without_label(decorate):
    """Test the control column is offset when there is no label."""
    from html_formgen.elements import Input

    element = decorate(Input("a", options={"grid": ["col-sm-2", "col-sm-10"]}, attrs={"id": "a"}))
    assert '<div class="col-sm-offset-2 col-sm-10">' in element.render()


def test_grid_inherited_from_form(decorate):
    """Test a grid set on the form applies to its controls."""
    from html_formgen.elements import Form, Input

    element = Input("email", options={"label": "Email"}, attrs={"id": "email"})
    form = decorate(Form(options={"grid": ("col-sm-2", "col-sm-10")}, children=[element]))

    html = form.render()
    assert html.startswith('<form method="post"><div class="form-group">')
    assert '<label class="control-label col-sm-2" for="email">' in html
    assert '<div class="col-sm-10">' in html


def test_prepend_addon(decorate):
    """Test prepend text renders an input group with an addon."""
    from html_formgen.elements import Input

    element = decorate(Input("price", options={"prepend": "$"}, attrs={"id": "price"}))

    assert element.render() == (
        '<div class="form-group">'
        '<div class="input-group">'
        '<span class="input-group-addon">$</span>'
        '<input class="form-control" type="text" id="price" name="price">'
        '</div>'
        '</div>'
    )


def test_append_button_addon(decorate):
    """Test a button as addon content is classified as input-group-btn."""
    from html_formgen.elements import Input, Button

    go = decorate(Button("Go"))
    element = decorate(Input("q", options={"prepend": "@", "append": go}, attrs={"id": "q"}))

    assert element.render() == (
        '<div class="form-group">'
        '<div class="input-group">'
        '<span class="input-group-addon">@</span>'
        '<input class="form-control" type="text" id="q" name="q">'
        '<span class="input-group-btn"><button class="btn btn-default" type="button">Go</button></span>'
        '</div>'
        '</div>'
    )


def test_addon_classification_follows_content(decorate):
    """Test addon classes are decided by the content at render time."""
    from html_formgen.elements import Input, Button

    element = decorate(Input("q", options={"append": "!"}, attrs={"id": "q"}))
    assert 'class="input-group-addon"' in element.render()

    element.set_option("append", Button("Go"))
    assert 'class="input-group-btn"' in element.render()


def test_help_outside_input_group(decorate):
    """Test help and error blocks follow the input group, not inside it."""
    from html_formgen.elements import Input

    element = decorate(Input("price", options={"append": "EUR", "help": "Net price"}, attrs={"id": "price"}))
    element.set_error("Too low")

    assert element.render() == (
        '<div class="form-group has-error">'
        '<div class="input-group">'
        '<input class="form-control" type="text" id="price" name="price">'
        '<span class="input-group-addon">EUR</span>'
        '</div>'
        '<span class="help-block">Net price</span>'
        '<span class="help-block error">Too low</span>'
        '</div>'
    )


def test_no_input_group_with_label_inside(decorate):
    """Test addons are not grouped when the label wraps the control."""
    from html_formgen.elements import Input

    element = decorate(Input("a", "A", options={"label": "inside", "prepend": "$"}, attrs={"id": "a"}))
    html = element.render()
    assert 'class="input-group"' not in html
    assert '<span class="input-group-addon">$</span><label for="a">' in html


def test_labeled_button_folds_addons(decorate):
    """Test labeled buttons render prepend/append as label spans in their content."""
    from html_formgen.decorators.bootstrap import icon
    from html_formgen.elements import Button

    button = decorate(Button("Save", options={"prepend": icon("ok"), "append": "!"},
                             attrs={"class": "btn-labeled", "type": "submit"}))

    assert button.render() == (
        '<button class="btn-labeled btn btn-default" type="submit">'
        '<span class="btn-label"><i class="glyphicon glyphicon-ok"></i></span>'
        'Save'
        '<span class="btn-label btn-label-right">!</span>'
        '</button>'
    )


def test_labeled_input_button_logs_dropped_addons(decorate, caplog):
    """Test addons of a labeled <input> button are dropped with a debug message."""
    from html_formgen.elements import Input

    element = decorate(Input("go", options={"prepend": "+"}, attrs={"id": "go", "class": "btn-labeled"},
                             input_type="submit"))
    with caplog.at_level(logging.DEBUG, logger="html_formgen"):
        html = element.render()

    assert "btn-label" not in html.replace("btn-labeled", "")
    assert "+" not in html
    assert "'go'" in caplog.text


def test_addons_on_select_are_not_wrapped(decorate):
    """Test addons of controls other than text inputs are added as raw content."""
    from html_formgen.elements import Select

    element = decorate(Select("c", items=["x"], options={"prepend": "$"}, attrs={"id": "c"}))
    html = element.render()

    assert "$<select" in html
    assert "<span" not in html
    assert 'class="input-group"' not in html


def test_labeled_button_in_container_has_no_addons(decorate):
    """Test a contained labeled button does not add addon nodes around itself."""
    from html_formgen.elements import Button

    button = decorate(Button("Save", options={"prepend": "+", "container": True},
                             attrs={"class": "btn-labeled"}))

    assert button.render() == (
        '<div class="form-group">'
        '<button class="btn-labeled btn btn-default" type="button">'
        '<span class="btn-label">+</span>Save'
        '</button>'
        '</div>'
    )


def test_required_suffix(decorate):
    """Test required controls get the required suffix in their label."""
    from html_formgen.elements import Input
    from html_formgen.protocols import FormGenConfig, set_form_config

    set_form_config(FormGenConfig(required_suffix=" *"))
    element = decorate(Input("email", options={"label": "Email"}, attrs={"id": "email", "required": True}))

    assert '<label class="control-label" for="email">Email *</label>' in element.render()


def test_validation_script_rendered_last(decorate):
    """Test the validation script is the last node of the container."""
    from html_formgen.elements import Input

    element = decorate(Input("confirm", options={"label": "Confirm", "match": "password", "help": "Repeat"},
                             attrs={"id": "confirm"}))

    html = element.render()
    assert html.index('<span class="help-block">Repeat</span>') < html.index("<script")
    assert html.endswith("</script></div>")


def test_capability_mismatch_is_noop(bootstrap):
    """Test hooks return the markup unchanged for elements lacking capabilities."""
    from html_formgen.elements import Group, Input

    group = Group()
    bootstrap.apply(group)
    assert bootstrap.render(group, "<x>") == "<x>"
    assert bootstrap.render_content(group, "<x>") == "<x>"
    assert bootstrap.render("not an element", "<x>") == "<x>"
    assert bootstrap.render_content(Input("a"), "<x>") == "<x>"
    assert bootstrap.render(Input("u", attrs={"id": "u"}), "<x>") == "<x>"


def test_no_container_option(decorate):
    """Test the container option turns off structural wrapping."""
    from html_formgen.elements import Input

    element = decorate(Input("a", options={"container": False, "label": "A"}, attrs={"id": "a"}))
    assert element.render() == '<input class="form-control" type="text" id="a" name="a">'


def test_decorating_twice_is_harmless(bootstrap):
    """Test applying the decorator twice does not duplicate output."""
    from html_formgen.elements import Input

    element = Input("a", options={"label": "A", "prepend": "$"}, attrs={"id": "a"})
    element.add_decorator(bootstrap)
    expected = element.render()

    bootstrap.apply(element)
    assert element.render() == expected


def test_deep_decoration_of_form(decorate):
    """Test the decorator reaches nested controls."""
    from html_formgen.elements import Form, Fieldset, Input, Button

    name = Input("name", options={"label": "Name"}, attrs={"id": "name"})
    submit = Button("Send", attrs={"type": "submit"}, options={"btn": "primary"})
    form = decorate(Form(children=[Fieldset("You", children=[name]), submit]))

    assert form.render() == (
        '<form method="post">'
        '<fieldset><legend>You</legend>'
        '<div class="form-group">'
        '<label class="control-label" for="name">Name</label>'
        '<input class="form-control" type="text" id="name" name="name">'
        '</div>'
        '</fieldset>'
        '<button class="btn btn-primary" type="submit">Send</button>'
        '</form>'
    )


# ---- icons and registration -------------------------------------------------

def test_icon():
    """Test icon markup with explicit and default fontsets."""
    from html_formgen.decorators.bootstrap import Bootstrap, icon
    from html_formgen.protocols import FormGenConfig, set_form_config

    assert icon("ok circle", "fa") == '<i class="fa fa-ok fa-circle"></i>'
    assert icon("ok") == '<i class="glyphicon glyphicon-ok"></i>'
    assert Bootstrap.icon("star") == '<i class="glyphicon glyphicon-star"></i>'

    set_form_config(FormGenConfig(default_fontset="fa"))
    assert icon("user") == '<i class="fa fa-user"></i>'


def test_register():
    """Test registration of the decorator and Bootstrap elements."""
    from html_formgen.decorators import get_decorator_class
    from html_formgen.decorators.bootstrap import Bootstrap
    from html_formgen.decorators.bootstrap.elements import Fileinput, Imageinput
    from html_formgen.elements import get_element_class

    Bootstrap.register()

    assert get_decorator_class("bootstrap") is Bootstrap
    assert get_element_class("bootstrap/fileinput") is Fileinput
    assert get_element_class("bootstrap/imageinput") is Imageinput
