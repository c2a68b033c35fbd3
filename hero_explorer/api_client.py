# api_client.py
import logging
from typing import Optional
from urllib.parse import quote

import httpx

from hero_explorer.models import ApiResponse
from hero_explorer.settings import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)


class ApiClient(object):
    """封装所有与 superhero API 的交互"""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, access_token: str = "", timeout: float = 10.0, client: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        # 测试时可注入带 MockTransport 的 client
        self.client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def search_url(self, query: str) -> str:
        # 查询词作为单个路径段，保留字符全部转义
        return f"{self.base_url}/{quote(self.access_token, safe='')}/search/{quote(query, safe='')}"

    def search_heroes(self, query: str) -> ApiResponse:
        """
        GET /<token>/search/<query>.

        Raises httpx errors for transport failures and non-2xx responses, and
        pydantic's ValidationError / ValueError for a malformed body. The
        caller decides what a "success" without results means.
        """
        url = self.search_url(query)
        logger.info("Searching heroes: %r", query)
        response = self.client.get(url)
        response.raise_for_status()
        result = ApiResponse.model_validate(response.json())
        logger.info("Search %r -> %s, %d result(s)", query, result.response, len(result.results))
        return result

    def fetch_image(self, url: str) -> bytes:
        """头像图片原始字节"""
        response = self.client.get(url)
        response.raise_for_status()
        return response.content

    def close(self):
        self.client.close()
