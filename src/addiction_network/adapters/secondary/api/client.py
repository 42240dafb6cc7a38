import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests
from dateutil import parser as dateparser

from ....domain.exceptions import LeaderboardSubmissionError, LeaderboardUnavailableError
from ....domain.leaderboard import ScoreEntry
from ....ports.outbound.leaderboard import ILeaderboardClient

logger = logging.getLogger(__name__)


class SupabaseLeaderboardClient(ILeaderboardClient):
    """
    Leaderboard backed by a Supabase table through its PostgREST API

    Requests are made once; callers decide whether to retry.
    """

    def __init__(self, base_url: str, api_key: str, table: str = "leaderboard", timeout: float = 10.0):
        self._base_url = base_url.rstrip("/")
        self._table = table
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json"
        })

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/rest/v1/{self._table}"

    def _request(self, method: str, **kwargs) -> Any:
        """Make one HTTP request and decode its JSON body"""
        response = self._session.request(method, self.endpoint, timeout=self._timeout, **kwargs)

        if not response.ok:
            try:
                error_body = response.json()
            except ValueError:
                error_body = response.text
            logger.error(f"Leaderboard API error {response.status_code}: {error_body}")

        response.raise_for_status()
        return response.json()

    def fetch_top_scores(self, limit: int = 10) -> List[ScoreEntry]:
        """
        Get the best scores.

        Endpoint: GET /rest/v1/{table}?select=name,score,created_at&order=score.desc&limit={limit}
        """
        try:
            rows = self._request(
                "GET",
                params={
                    "select": "name,score,created_at",
                    "order": "score.desc",
                    "limit": limit
                }
            )
        except (requests.exceptions.RequestException, ValueError) as e:
            raise LeaderboardUnavailableError(f"Could not fetch leaderboard: {e}") from e

        try:
            return [self._to_entry(row) for row in rows]
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed leaderboard row: {e}")
            raise LeaderboardUnavailableError(f"Malformed leaderboard data: {e}") from e

    def submit_score(self, name: str, score: int) -> ScoreEntry:
        """
        Insert a score row.

        Endpoint: POST /rest/v1/{table} with payload [{name, score}]
        """
        try:
            rows = self._request(
                "POST",
                json=[{"name": name, "score": score}],
                headers={"Prefer": "return=representation"}
            )
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Error adding score: {e}")
            raise LeaderboardSubmissionError(f"Could not submit score: {e}") from e

        logger.info(f"Score added successfully: {name} {score}")
        if rows:
            try:
                return self._to_entry(rows[0])
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Malformed representation of stored score: {e}")
        return ScoreEntry(name=name, score=score)

    @staticmethod
    def _to_entry(row: Dict[str, Any]) -> ScoreEntry:
        return ScoreEntry(
            name=row["name"],
            score=int(row["score"]),
            created_at=_parse_timestamp(row.get("created_at"))
        )


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return dateparser.isoparse(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Unparseable created_at: {value}")
        return None
