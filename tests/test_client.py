import pytest

from tessclient.client import Client
from tessclient.domain.models import PageSegMode
from tessclient.errors import ConfigFileError, InitializationError, UseAfterRelease, VariableBindError
from conftest import FakeAPI


def test_builder_chains(client):
    out = client.set_image("x.png").set_language("eng", "fra").set_whitelist("ab").set_page_seg_mode(PageSegMode.AUTO)
    assert out is client
    assert client.state.image_path == "x.png"
    assert client.state.languages == ["eng", "fra"]
    assert client.state.variables == {"tessedit_char_whitelist": "ab"}
    assert client.state.page_seg_mode == 3


def test_defaults(client):
    assert client.state.trim is True
    assert client.state.languages == []
    assert client.state.config_file_path is None


def test_last_variable_write_wins(client):
    client.set_variable("k", "v1").set_variable("k", "v2")
    assert client.state.variables == {"k": "v2"}


def test_config_file_directory_rejected(client, tmp_path):
    cfg = tmp_path / "ok.cfg"
    cfg.write_text("x 1\n")
    client.set_config_file(str(cfg))
    with pytest.raises(ConfigFileError):
        client.set_config_file(str(tmp_path))
    assert client.state.config_file_path == str(cfg)


def test_config_file_missing_rejected(client, tmp_path):
    with pytest.raises(ConfigFileError):
        client.set_config_file(str(tmp_path / "missing.cfg"))
    assert client.state.config_file_path is None


def test_text_trims_newlines_only(client, api):
    assert client.set_image("x.png").text() == "Hello World"
    api.output = " Hello World "
    assert client.text() == " Hello World "


def test_text_without_trim(client, api):
    assert client.set_trim(False).text() == "\nHello World\n"


def test_html_never_trimmed(client, api):
    assert client.html() == api.hocr
    assert api.names() == ["init", "set_image", "hocr_text"]


def test_repeated_text_reruns_commit(client, api):
    client.set_image("x.png").set_language("eng")
    first = client.text()
    second = client.text()
    assert first == second
    assert api.names() == ["init", "set_image", "utf8_text"] * 2


def test_init_failure_stops_extraction():
    api = FakeAPI(init_code=1)
    with Client(factory=lambda: api) as client:
        with pytest.raises(InitializationError):
            client.text()
    assert api.names() == ["init"]


def test_any_operation_after_close_fails(client):
    client.close()
    for op in (
        client.close,
        client.text,
        client.html,
        lambda: client.set_image("x.png"),
        lambda: client.set_language("eng"),
        lambda: client.set_variable("k", "v"),
        lambda: client.set_whitelist("a"),
        lambda: client.set_page_seg_mode(6),
        lambda: client.set_trim(False),
        lambda: client.set_config_file("x.cfg"),
        lambda: client.set_tessdata_prefix("/opt/tessdata"),
    ):
        with pytest.raises(UseAfterRelease):
            op()


def test_context_manager_releases():
    api = FakeAPI()
    with Client(factory=lambda: api) as client:
        client.text()
    assert client.handle.closed
    assert api.ended == 1


def test_tessdata_prefix_reaches_init(client, api):
    client.set_tessdata_prefix("/opt/tessdata").set_language("eng").text()
    assert api.calls[0] == ("init", "/opt/tessdata", "eng", None)


def test_rejected_variable_stops_extraction():
    api = FakeAPI(rejected={"bogus"})
    with Client(factory=lambda: api) as client:
        client.set_variable("bogus", "1")
        with pytest.raises(VariableBindError) as exc:
            client.text()
        assert (exc.value.key, exc.value.value) == ("bogus", "1")
        with pytest.raises(VariableBindError):
            client.html()
    assert "utf8_text" not in api.names()
    assert "hocr_text" not in api.names()
