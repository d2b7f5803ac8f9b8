"""In-memory stand-ins for a selenium driver and its elements."""

from selenium.common.exceptions import NoSuchElementException


class FakeElement:
    def __init__(self, text='', attrs=None, displayed=True, enabled=True, children=None,
                 tag_name='div', on_click=None):
        self.text = text
        self.attrs = dict(attrs or {})
        self.displayed = displayed
        self.enabled = enabled
        self.children = {tuple(k): list(v) for k, v in (children or {}).items()}
        self.tag_name = tag_name
        self.on_click = on_click
        self.clicks = 0
        self.cleared = 0
        self.sent_keys = []

    def __repr__(self):
        return f"FakeElement(text={self.text!r})"

    def is_displayed(self):
        return self.displayed

    def is_enabled(self):
        return self.enabled

    def get_attribute(self, name):
        return self.attrs.get(name)

    def click(self):
        self.clicks += 1
        if self.on_click is not None:
            self.on_click()

    def clear(self):
        self.cleared += 1

    def send_keys(self, text):
        self.sent_keys.append(text)

    def find_element(self, by, value):
        found = self.children.get((by, value))
        if not found:
            raise NoSuchElementException(f"{by}={value}")
        return found[0]

    def find_elements(self, by, value):
        return list(self.children.get((by, value), []))


class FakeDriver:
    def __init__(self, url='https://www.saucedemo.com/'):
        self.elements = {}
        self.current_url = url
        self.title = 'Swag Labs'
        self.page_source = '<html><body>fake</body></html>'
        self.capabilities = {'browserName': 'chrome', 'browserVersion': '120.0', 'platformName': 'linux'}
        self.ready_state = 'complete'
        self.visited = []
        self.scripts = []
        self.refreshed = 0
        self.quit_called = False

    def add(self, locator, *elements):
        self.elements.setdefault(tuple(locator), []).extend(elements)
        return elements[0] if elements else None

    def remove(self, locator):
        self.elements.pop(tuple(locator), None)

    def find_element(self, by, value):
        found = self.elements.get((by, value))
        if not found:
            raise NoSuchElementException(f"{by}={value}")
        return found[0]

    def find_elements(self, by, value):
        return list(self.elements.get((by, value), []))

    def get(self, url):
        self.current_url = url
        self.visited.append(url)

    def refresh(self):
        self.refreshed += 1

    def execute_script(self, script, *args):
        self.scripts.append(script)
        if 'readyState' in script:
            return self.ready_state
        if 'getBoundingClientRect' in script:
            return True
        return None

    def get_screenshot_as_png(self):
        return b'\x89PNG\r\n\x1a\nfake'

    def quit(self):
        self.quit_called = True

