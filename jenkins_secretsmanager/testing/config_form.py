"""
Plugin Configuration Form

Queries the Jenkins global configuration form for the elements browser
tests interact with: validation banners, repeatable-field "Add" buttons,
descriptor dropdowns and validate buttons.
"""

from typing import List, Optional

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.select import Select

# Jenkins shows this "ok" banner on every configure page; it is not ours.
RESOURCE_ROOT_URL_NOTICE = (
    "Without a resource root URL, resources will be served from the main "
    "domain with Content-Security-Policy set."
)


def _text_content(element: WebElement) -> str:
    # textContent includes text of elements hidden by CSS, unlike .text
    return element.get_attribute("textContent") or ""


class PluginConfigurationForm:
    """Read-only view over the rendered configuration form."""

    def __init__(self, form: WebElement):
        self.form = form

    def get_validate_success_message(self) -> Optional[str]:
        """Text of the first success banner, if any."""
        for element in self.form.find_elements(By.XPATH, ".//div[@class='ok']"):
            message = _text_content(element)
            if message.lower() != RESOURCE_ROOT_URL_NOTICE.lower():
                return message
        return None

    def get_validate_error_message(self) -> str:
        """
        Text of the error banner.

        Raises:
            selenium.common.exceptions.NoSuchElementException: If there is none
        """
        return _text_content(self.form.find_element(By.XPATH, ".//div[@class='error']"))

    def get_repeatable_add_buttons(self, setting_name: str) -> List[WebElement]:
        xpath = (
            f".//td[contains(text(), '{setting_name}')]"
            "/following-sibling::td[@class='setting-main']"
            "//span[contains(string(@class),'repeatable-add')]"
            "//button[contains(text(), 'Add')]"
        )
        return self.form.find_elements(By.XPATH, xpath)

    def get_dropdown_descriptor_selectors(self, setting_name: str) -> List[Select]:
        xpath = (
            f".//td[contains(string(@class),'setting-name') and text()='{setting_name}']"
            "/following-sibling::td[contains(string(@class),'setting-main')]"
            "/select[contains(string(@class),'dropdownList')]"
        )
        return [Select(element) for element in self.form.find_elements(By.XPATH, xpath)]

    def get_validate_buttons(self, text_content: str) -> List[WebElement]:
        buttons = self.form.find_elements(
            By.XPATH, ".//span[contains(string(@class),'validate-button')]//button"
        )
        return [button for button in buttons if _text_content(button) == text_content]
