#!/usr/bin/env python3

"""
Configuration for the nasr_sct library and command line tool.
"""

import os

# NASR subscription archive layout
AIXM_DIR = "Additional_Data/AIXM/AIXM_5.1/XML-Subscriber-Files"
APT_AIXM_MEMBER = f"{AIXM_DIR}/APT_AIXM.zip"
NAV_AIXM_MEMBER = f"{AIXM_DIR}/NAV_AIXM.zip"
TWR_MEMBER = "TWR.txt"
FIX_MEMBER = "FIX.txt"

# Download Configuration
SUBSCRIPTION_URL_TEMPLATE = "https://nfdc.faa.gov/webContent/28DaySub/28DaySubscription_Effective_{date}.zip"
DOWNLOAD_TIMEOUT = 300  # seconds

# Cache Configuration
DEFAULT_CACHE_DIR = os.getenv("NASR_SCT_CACHE_DIR", os.path.join(os.path.expanduser("~"), ".cache", "nasr_sct"))
SUBSCRIPTION_MAX_AGE_DAYS = 28

# Parsing Configuration
XML_CHUNK_SIZE = 64 * 1024  # bytes fed to the XML tokenizer per read

# Output Configuration
DEFAULT_TOWER_FREQUENCY = "122.800"
DEFAULT_OUTPUT = "./output.sct2"

# Logging Configuration
LOG_LEVEL = os.getenv("NASR_SCT_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
