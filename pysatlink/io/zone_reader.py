# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Blockage zone file reading and writing"""

import logging
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from ..core.data_structures import BlockageZone

logger = logging.getLogger(__name__)

ZONE_COLUMNS = ['id', 'name', 'start_rel_az', 'end_rel_az', 'max_elevation']


class ZoneReader:
    """Reader for deck blockage zone tables"""

    def __init__(self, file_path: str):
        """
        Initialize zone reader

        Parameters:
        -----------
        file_path : str
            Path to a CSV file with columns id, name, start_rel_az,
            end_rel_az, max_elevation (extra columns are ignored)
        """
        self.file_path = Path(file_path)

        if not self.file_path.exists():
            raise FileNotFoundError(f"Zone file not found: {file_path}")

    def read_dataframe(self) -> pd.DataFrame:
        """
        Read the raw zone table

        Returns:
        --------
        pd.DataFrame
            Zone table restricted to the known columns, ids as strings
        """
        df = pd.read_csv(self.file_path, dtype={'id': str, 'name': str},
                         keep_default_na=False, skipinitialspace=True)
        missing = [col for col in ZONE_COLUMNS if col not in df.columns]
        if missing:
            raise ValueError(f"Zone file {self.file_path} is missing columns: {missing}")
        return df[ZONE_COLUMNS]

    def read(self) -> List[BlockageZone]:
        """
        Read and validate zones

        Returns:
        --------
        list of BlockageZone
            Zones in file order

        Raises:
        -------
        ValueError
            On a malformed row or a duplicated id
        """
        df = self.read_dataframe()
        zones = []
        seen = set()
        for row_number, row in enumerate(df.itertuples(index=False), start=2):
            if row.id in seen:
                raise ValueError(f"{self.file_path}:{row_number}: duplicate zone id '{row.id}'")
            try:
                zone = BlockageZone(
                    id=row.id,
                    name=row.name,
                    start_rel_az=float(row.start_rel_az),
                    end_rel_az=float(row.end_rel_az),
                    max_elevation=float(row.max_elevation),
                )
            except ValueError as exc:
                raise ValueError(f"{self.file_path}:{row_number}: {exc}") from exc
            seen.add(row.id)
            zones.append(zone)

        logger.info(f"Loaded {len(zones)} blockage zones from {self.file_path}")
        return zones


def read_zones_csv(file_path: str) -> List[BlockageZone]:
    """Read blockage zones from a CSV file"""
    return ZoneReader(file_path).read()


def zones_to_dataframe(zones: Iterable[BlockageZone]) -> pd.DataFrame:
    """Tabulate zones with the file column layout"""
    return pd.DataFrame(
        [[z.id, z.name, z.start_rel_az, z.end_rel_az, z.max_elevation] for z in zones],
        columns=ZONE_COLUMNS,
    )


def write_zones_csv(zones: Iterable[BlockageZone], file_path: str) -> None:
    """Write blockage zones to a CSV file readable by :func:`read_zones_csv`"""
    df = zones_to_dataframe(zones)
    df.to_csv(file_path, index=False)
    logger.info(f"Wrote {len(df)} blockage zones to {file_path}")
