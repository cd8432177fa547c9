"""
HTTP client for the workout API, used by the catalog browser.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON response"


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class WorkoutApiClient:
    TIMEOUT = 10.0

    def __init__(
            self,
            base_url: str = "http://localhost:8000",
            http: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url
        self._http = http

    async def _get_http(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(base_url=self.base_url, timeout=self.TIMEOUT)
        return self._http

    async def close(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        http = await self._get_http()
        response = await http.request(method, path, **kwargs)
        if response.is_error:
            try:
                message = response.json().get("error") or response.reason_phrase
            except (ValueError, AttributeError):
                message = response.reason_phrase
            raise ApiError(response.status_code, message)
        try:
            return response.json()
        except ValueError:
            logger.error("Non-JSON response from %s %s", method, path)
            raise ApiError(response.status_code, INVALID_JSON_MESSAGE)

    async def get_exercises(self) -> List[Dict]:
        return await self._request("GET", "/api/get-exercises")

    async def get_workouts(self) -> List[Dict]:
        return await self._request("GET", "/api/get-workouts")

    async def create_workout(self, name: str, notes: Optional[str], exercises: List[Dict]) -> Dict:
        return await self._request("POST", "/api/create-workout", json={
            "name": name,
            "notes": notes,
            "exercises": exercises,
        })

    async def delete_workout(self, workout_id: int) -> Dict:
        return await self._request("DELETE", f"/api/delete-workout/{workout_id}")
