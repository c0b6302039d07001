from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...api.presenters import HalUserPresenter, UserPresenter

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PresenterProvider:
    """Registers the response presenter: HAL envelopes or plain JSON"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        presenter = HalUserPresenter() if get_settings().hypermedia_enabled else UserPresenter()
        container.register_singleton(UserPresenter, presenter)
