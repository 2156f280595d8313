"""REST API adapter - HTTP client for task fetching."""

import logging

import requests

from taskmatrix.adapters.json_file import parse_tasks
from taskmatrix.core.tasks import Task
from taskmatrix.ports.task_repo import TaskSourceError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ApiTaskRepository:
    """
    Task API adapter.

    Implements TaskRepository protocol. Sends a static bearer token when one
    is configured. No business logic - just I/O.
    """

    def __init__(self, base_url: str, token: str = "", timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._session = requests.Session()

    def _api_request(self, endpoint: str) -> dict | list:
        """Make API request, optionally authenticated."""
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        url = f"{self.base_url}{endpoint}"
        try:
            resp = self._session.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise TaskSourceError(f"Could not reach {url}: {e}") from e

        if resp.status_code == 401:
            raise TaskSourceError("Unauthorized. Check API_TOKEN in taskmatrix.conf")
        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise TaskSourceError(f"Task API error: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise TaskSourceError(f"Task API returned invalid JSON from {url}") from e

    def fetch_all(self) -> list[Task]:
        """Fetch all tasks."""
        data = self._api_request("/tasks")
        tasks = parse_tasks(data, f"{self.base_url}/tasks")
        logger.debug("Fetched %d tasks from %s", len(tasks), self.base_url)
        return tasks
