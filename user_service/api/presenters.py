"""
Response formatting for user resources.

UserPresenter renders bare JSON objects and arrays. HalUserPresenter wraps
the same payloads in HAL envelopes with ``_links`` (and ``_embedded`` for
collections). The DI container picks one based on HYPERMEDIA_ENABLED.
"""

# Standard library imports
from typing import Any, Dict, List, Sequence

# Local application imports
from ..application.dto.user_dto import UserResponse

USERS_PATH = "/api/users"


def user_path(user_id: int) -> str:
    return f"{USERS_PATH}/{user_id}"


class UserPresenter:
    """Plain JSON representation of users"""

    def user(self, user: UserResponse, base_url: str = "", include_collection_link: bool = True) -> Dict[str, Any]:
        """
        Render a single user

        Args:
            user: User to render
            base_url: Scheme and host prefix for links (unused by plain output)
            include_collection_link: Whether HAL output links back to the list

        Returns:
            JSON-ready dictionary
        """
        return user.model_dump(by_alias=True)

    def users(self, users: Sequence[UserResponse], base_url: str = "") -> Any:
        return [self.user(user, base_url) for user in users]


class HalUserPresenter(UserPresenter):
    """HAL representation of users with self/collection links"""

    collection_rel = "users"

    def user(self, user: UserResponse, base_url: str = "", include_collection_link: bool = True) -> Dict[str, Any]:
        body = super().user(user, base_url)
        links: Dict[str, Dict[str, str]] = {"self": self._link(base_url, user_path(user.id))}
        if include_collection_link:
            links[self.collection_rel] = self._link(base_url, USERS_PATH)
        body["_links"] = links
        return body

    def users(self, users: Sequence[UserResponse], base_url: str = "") -> Dict[str, Any]:
        embedded: List[Dict[str, Any]] = [self.user(user, base_url) for user in users]
        return {
            "_embedded": {self.collection_rel: embedded},
            "_links": {"self": self._link(base_url, USERS_PATH)},
        }

    @staticmethod
    def _link(base_url: str, path: str) -> Dict[str, str]:
        return {"href": f"{base_url.rstrip('/')}{path}"}
