import pytest


class FakeAPI:
    """In-memory TessBaseAPI recording every call."""

    def __init__(self, init_code=0, rejected=(), output="\nHello World\n", hocr="<div class='ocr_page'></div>\n"):
        self.init_code = init_code
        self.rejected = set(rejected)
        self.output = output
        self.hocr = hocr
        self.calls = []
        self.variables = {}
        self.ended = 0

    def init(self, datapath, language, configfile):
        self.calls.append(("init", datapath, language, configfile))
        return self.init_code

    def set_image(self, path):
        self.calls.append(("set_image", path))

    def set_variable(self, name, value):
        self.calls.append(("set_variable", name, value))
        if name in self.rejected:
            return False
        self.variables[name] = value
        return True

    def set_page_seg_mode(self, mode):
        self.calls.append(("set_page_seg_mode", mode))

    def utf8_text(self):
        self.calls.append(("utf8_text",))
        return self.output

    def hocr_text(self):
        self.calls.append(("hocr_text",))
        return self.hocr

    def version(self):
        return "5.3.0"

    def end(self):
        self.ended += 1

    def names(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def api():
    return FakeAPI()


@pytest.fixture
def client(api):
    from tessclient.client import Client

    c = Client(factory=lambda: api)
    yield c
    if not c.handle.closed:
        c.close()
