# tests/unit/fakes.py
#
# In-memory stand-ins for a WebDriver and its elements. They implement just
# enough of the element API for Selenium's expected_conditions to poll them.

from decimal import Decimal

from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException

from demoshop_e2e.page_objects.locators import CartPageLocators


class FakeElement:
    def __init__(self, text="", tag_name="div", attributes=None, displayed=True, enabled=True,
                 selected=False, children=None, on_click=None):
        self._text = text
        self.tag_name = tag_name
        self.attributes = dict(attributes or {})
        self.displayed = displayed
        self.enabled = enabled
        self.selected = selected
        self.children = dict(children or {})
        self.on_click = on_click
        self.stale = False
        self.clicks = 0

    def _check_attached(self):
        if self.stale:
            raise StaleElementReferenceException("element is not attached to the page document")

    @property
    def text(self):
        self._check_attached()
        return self._text if self.displayed else ""

    def is_displayed(self):
        self._check_attached()
        return self.displayed

    def is_enabled(self):
        self._check_attached()
        return self.enabled

    def is_selected(self):
        self._check_attached()
        return self.selected

    def get_attribute(self, name):
        self._check_attached()
        return self.attributes.get(name)

    def click(self):
        self._check_attached()
        self.clicks += 1
        if self.tag_name == "input" and self.attributes.get("type") in ("checkbox", "radio"):
            self.selected = not self.selected if self.attributes["type"] == "checkbox" else True
        if self.on_click is not None:
            self.on_click()

    def clear(self):
        self._check_attached()
        self.attributes["value"] = ""

    def send_keys(self, *values):
        self._check_attached()
        self.attributes["value"] = self.attributes.get("value", "") + "".join(str(v) for v in values)

    def find_elements(self, by, value):
        self._check_attached()
        return list(self.children.get((by, value), []))

    def find_element(self, by, value):
        found = self.find_elements(by, value)
        if not found:
            raise NoSuchElementException(f"No child element matches {(by, value)}")
        return found[0]


class FakeDriver:
    """A page as a mapping of locator -> elements currently in the DOM."""

    def __init__(self, elements=None, current_url="https://shop.test/", title="Demo Web Shop"):
        self.elements = dict(elements or {})
        self.current_url = current_url
        self.title = title
        self.page_source = "<html></html>"
        self.visited = []
        self.scripts = []

    def set(self, locator, *elements):
        self.elements[locator] = list(elements)

    def remove(self, locator):
        for element in self.elements.pop(locator, []):
            element.stale = True

    def find_elements(self, by, value):
        return list(self.elements.get((by, value), []))

    def find_element(self, by, value):
        found = self.find_elements(by, value)
        if not found:
            raise NoSuchElementException(f"No element matches {(by, value)}")
        return found[0]

    def get(self, url):
        self.visited.append(url)
        self.current_url = url

    def execute_script(self, script, *args):
        self.scripts.append(script)
        if "document.readyState" in script:
            return "complete"
        return None

    def save_screenshot(self, path):
        with open(path, "wb") as f:
            f.write(b"\x89PNG fake")
        return True


class FakeCart:
    """A rendered /cart page that re-renders itself when 'Update shopping cart' is clicked.

    Every update detaches the old rows and button and renders new ones, the way
    the real page reloads.
    """

    locators = CartPageLocators

    def __init__(self, driver: FakeDriver, items):
        self.driver = driver
        # (name, unit price, quantity)
        self.items = [(name, Decimal(price), quantity) for name, price, quantity in items]
        self.render()

    def _row(self, name, price, quantity):
        loc = self.locators
        return FakeElement(tag_name="tr", children={
            loc.NAME_RELATIVE: [FakeElement(name)],
            loc.UNIT_PRICE_RELATIVE: [FakeElement(f"{price:.2f}")],
            loc.QUANTITY_RELATIVE: [FakeElement(tag_name="input", attributes={"value": str(quantity)})],
            loc.SUBTOTAL_RELATIVE: [FakeElement(f"{price * quantity:.2f}")],
            loc.REMOVE_CHECKBOX_RELATIVE: [FakeElement(tag_name="input", attributes={"type": "checkbox"})],
        })

    def render(self):
        loc = self.locators
        for locator in (loc.CART_ROWS, loc.UPDATE_CART_BUTTON, loc.ORDER_TOTAL_AMOUNT):
            self.driver.remove(locator)
        rows = [self._row(*item) for item in self.items]
        total = sum((price * quantity for _, price, quantity in self.items), Decimal("0"))
        self.driver.set(loc.CART_ROWS, *rows)
        self.driver.set(loc.UPDATE_CART_BUTTON, FakeElement(tag_name="input", on_click=self.update))
        self.driver.set(loc.ORDER_TOTAL_AMOUNT, FakeElement(f"{total:.2f}"))
        self.driver.set(loc.ORDER_SUMMARY_CONTENT, FakeElement("cart" if rows else "Your Shopping Cart is empty!"))

    def update(self):
        loc = self.locators
        updated = []
        for row, (name, price, _) in zip(self.driver.elements[loc.CART_ROWS], self.items):
            removed = row.find_element(*loc.REMOVE_CHECKBOX_RELATIVE).selected
            quantity = int(row.find_element(*loc.QUANTITY_RELATIVE).attributes["value"] or 0)
            if not removed and quantity > 0:
                updated.append((name, price, quantity))
        self.items = updated
        self.render()
