import io
import logging
import zipfile
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, List, Optional, Union

import pandas as pd
import requests

from .. import config
from ..exceptions import ArchiveError
from ..models.airport import Airport
from ..models.airspace import AirspaceClass
from ..models.fix import Fix
from ..models.navaid import Navaid
from ..parsers.aixm import get_airport_info, get_navaid_info
from ..parsers.fixed_width import DataFile
from ..parsers.nasr_txt import tower_frequencies, tower_airspace, fix_table, fixes_for_artccs
from ..parsers.xml_events import XmlEventCursor
from ..utils.airac_date_calculator import AIRACDateCalculator
from .cached import CachedSource

logger = logging.getLogger(__name__)


class NasrSubscriptionSource(CachedSource):
    """
    FAA NASR 28-day subscription archive.

    The archive is either a local zip file or downloaded from the FAA for
    the effective AIRAC cycle and cached. AIXM files are shipped as zip
    files nested inside the subscription archive; fixed-width text files
    are stored directly.

    Example:
        ```python
        source = NasrSubscriptionSource("cache", archive_path="28DaySubscription.zip")
        airports = source.airports(["ZHU"])
        ```
    """

    def __init__(self, cache_dir: str = config.DEFAULT_CACHE_DIR,
                 archive_path: Optional[Union[str, Path]] = None,
                 airac_date: Optional[str] = None):
        """
        Initialize the NASR source.

        Args:
            cache_dir: Base directory for caching downloaded subscriptions
            archive_path: Local subscription zip; when given nothing is downloaded
            airac_date: Effective date to download (defaults to the current cycle)
        """
        super().__init__(cache_dir)
        self.archive_path = Path(archive_path) if archive_path is not None else None
        self.airac_date = airac_date or AIRACDateCalculator().get_current_airac_date()
        self._archive: Optional[zipfile.ZipFile] = None

    def fetch_subscription(self, airac_date: str) -> bytes:
        """
        Download the subscription archive effective on ``airac_date``.

        Raises:
            requests.HTTPError: If the FAA server rejects the request
        """
        url = config.SUBSCRIPTION_URL_TEMPLATE.format(date=airac_date)
        logger.info(f"Downloading {url}")
        response = requests.get(url, timeout=config.DOWNLOAD_TIMEOUT)
        response.raise_for_status()
        return response.content

    @property
    def archive(self) -> zipfile.ZipFile:
        """The opened subscription archive."""
        if self._archive is None:
            if self.archive_path is not None:
                self._archive = zipfile.ZipFile(self.archive_path)
            else:
                data = self.get_data('subscription', 'zip', self.airac_date,
                                     max_age_days=config.SUBSCRIPTION_MAX_AGE_DAYS)
                self._archive = zipfile.ZipFile(io.BytesIO(data))
        return self._archive

    def close(self) -> None:
        if self._archive is not None:
            self._archive.close()
            self._archive = None

    def _read_member(self, member: str) -> bytes:
        try:
            return self.archive.read(member)
        except KeyError:
            raise ArchiveError(f"{member} not found in NASR subscription archive")

    def aixm_stream(self, member: str) -> BinaryIO:
        """
        Unpack a nested AIXM zip.

        Args:
            member: Path of the nested zip inside the subscription archive

        Returns:
            In-memory stream over the first file of the nested zip
        """
        logger.info(f"Unpacking {member}")
        with zipfile.ZipFile(io.BytesIO(self._read_member(member))) as inner:
            names = inner.namelist()
            if not names:
                raise ArchiveError(f"{member} is empty")
            return io.BytesIO(inner.read(names[0]))

    def data_file(self, member: str) -> DataFile:
        """Load a fixed-width text file from the subscription archive."""
        return DataFile.from_bytes(self._read_member(member))

    def airports(self, artcc_ids: Iterable[str]) -> List[Airport]:
        cursor = XmlEventCursor(self.aixm_stream(config.APT_AIXM_MEMBER))
        logger.info("Processing airport AIXM")
        return get_airport_info(cursor, artcc_ids)

    def navaids(self, artcc_ids: Iterable[str]) -> List[Navaid]:
        cursor = XmlEventCursor(self.aixm_stream(config.NAV_AIXM_MEMBER))
        logger.info("Processing navaid AIXM")
        return get_navaid_info(cursor, artcc_ids)

    def tower_frequencies(self, twr: Optional[DataFile] = None) -> Dict[str, str]:
        return tower_frequencies(twr or self.data_file(config.TWR_MEMBER))

    def tower_airspace(self, twr: Optional[DataFile] = None) -> Dict[str, AirspaceClass]:
        return tower_airspace(twr or self.data_file(config.TWR_MEMBER))

    @property
    def cycle_key(self) -> str:
        """Cache key of the subscription: local archive name or AIRAC date."""
        if self.archive_path is not None:
            return self.archive_path.stem
        return self.airac_date

    def fetch_fix_table(self, cycle_key: str) -> pd.DataFrame:
        """Parse the FIX1 records of FIX.txt."""
        logger.info(f"Parsing {config.FIX_MEMBER} for {cycle_key}")
        return fix_table(self.data_file(config.FIX_MEMBER))

    def fixes(self, artcc_ids: Iterable[str]) -> List[Fix]:
        """
        Fixes of the given ARTCCs.

        The parsed FIX1 table is cached as csv per subscription, so later
        runs for other ARTCCs skip the fixed-width parse.
        """
        logger.info("Processing fix data")
        table = self.get_data('fix_table', 'csv', self.cycle_key)
        return list(fixes_for_artccs(table, artcc_ids))
