"""File upload elements registered by Bootstrap.register()."""

from html_formgen.elements import Input


class Fileinput(Input):
    """A file upload input."""

    default_attrs = {"type": "file"}


class Imageinput(Fileinput):
    """A file upload input restricted to images."""

    default_attrs = {"type": "file", "accept": "image/*"}
