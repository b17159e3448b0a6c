"""Verify every module imports cleanly with no errors."""


def test_import_strikeforce():
    import strikeforce  # noqa: F401


def test_import_cli():
    import strikeforce.cli  # noqa: F401


def test_import_config():
    import strikeforce.config  # noqa: F401


def test_import_defaults():
    import strikeforce.defaults  # noqa: F401


def test_import_ledger():
    import strikeforce.ledger  # noqa: F401


def test_import_ops():
    import strikeforce.ops  # noqa: F401


def test_import_output():
    import strikeforce.output  # noqa: F401


def test_import_replay():
    import strikeforce.replay  # noqa: F401
