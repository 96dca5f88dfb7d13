import logging

import pytest

from kandilli_quake.logger import LIB_LOGGER_NAME
from kandilli_quake.parser import RecordParser

SAMPLE_PAGE = """<HTML><HEAD><TITLE>Son Depremler</TITLE></HEAD>
<pre>
RECENT EARTHQUAKES IN TURKEY
KANDILLI OBSERVATORY AND EARTHQUAKE RESEARCH INSTITUTE (KOERI)

Date       Time      Latit(N)  Long(E)   Depth(km)     MD   ML   Mw    Region
---------- --------  --------  -------   ----------    ------------    -----------
2023.05.01 12:30:00   38.1234   27.5678   8.50  -.- 4.8 -.- Izmir-Bornova (AA)
2023.05.01 11:02:13  37.2001   36.9800        5.0      -.-  5.6  -.-   ONIKISUBAT-KAHRAMANMARAS (Ilksel)
2023.05.01 10:15:42  40.7000   29.1000       12.3      -.-  3.1  -.-   MARMARA- (REVIZE01)
2023.02.30 09:30:00  38.0000   27.0000        7.0      -.-  4.9  -.-   IZMIR-KARSIYAKA (Ilksel)
2023.05.01 09:00:00  36.1000   28.5000       95.0      -.-  5.2  -.-   AKDENIZ-RODOS (Ilksel)
</pre>
</HTML>
"""


@pytest.fixture
def sample_page():
    return SAMPLE_PAGE


@pytest.fixture
def utc_parser():
    return RecordParser(local_tz="UTC")


@pytest.fixture(autouse=True)
def reset_library_logger():
    yield
    logger = logging.getLogger(LIB_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
