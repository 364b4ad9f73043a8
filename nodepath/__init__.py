"""
nodepath: locator-based element abstraction for UI automation.

Elements never hold live node handles. Each one keeps an XPath locator
and re-resolves it through a driver on every call, so elements stay
usable across page mutations. Searches derive new locators by composing
the element's own locator with the searched selector, union-safe on both
sides.

Basic usage:
    from nodepath import DocumentElement, HtmlDriver, SelectorTranslator

    driver = HtmlDriver(html)
    page = DocumentElement(driver, SelectorTranslator())

    page.fill_field("Email", "user@example.com")
    page.find_field("Country").select_option("Japan")
    page.press_button("Sign up")

    driver.submitted_forms[-1]["fields"]

Waiting:
    from nodepath.waiters import ElementVisible

    message = page.find("css", ".message")
    message.wait_for(3000, ElementVisible())

Configuration:
    from nodepath.config import load_config, configure_logging

    config = load_config()
    configure_logging(config.logging)
    page = DocumentElement(driver, SelectorTranslator(), wait_options=config.wait)
"""

__version__ = "0.1.0"
__license__ = "MIT"

from nodepath.exceptions import (
    ConfigurationError,
    DriverError,
    ElementNotFoundError,
    InvalidArgumentError,
    NodepathError,
    UnsupportedDriverActionError,
)

from nodepath.elements import (
    DocumentElement,
    ElementFactory,
    Locator,
    NodeElement,
    OptionResolver,
    TraversableElement,
    compose,
    is_union,
)

from nodepath.selectors import (
    CssSelector,
    NamedSelector,
    SelectorTranslator,
    SelectorType,
)

from nodepath.waiters import (
    WaitLoop,
    WaitState,
)

from nodepath.drivers import (
    BaseDriver,
    HtmlDriver,
)

from nodepath.config import (
    DriverOptions,
    LoggingOptions,
    NodepathConfig,
    WaitOptions,
    configure_logging,
    load_config,
)

__all__ = [
    # Version info
    "__version__",
    # Exceptions
    "NodepathError",
    "InvalidArgumentError",
    "ElementNotFoundError",
    "DriverError",
    "UnsupportedDriverActionError",
    "ConfigurationError",
    # Elements
    "TraversableElement",
    "NodeElement",
    "DocumentElement",
    "ElementFactory",
    "OptionResolver",
    "Locator",
    "compose",
    "is_union",
    # Selectors
    "SelectorTranslator",
    "SelectorType",
    "CssSelector",
    "NamedSelector",
    # Waiting
    "WaitLoop",
    "WaitState",
    # Drivers
    "BaseDriver",
    "HtmlDriver",
    # Configuration
    "NodepathConfig",
    "WaitOptions",
    "DriverOptions",
    "LoggingOptions",
    "load_config",
    "configure_logging",
]
