import re
from pathlib import Path

AH_SITE_GROUP = "AH_SITE_GROUP"
AH_SITE_ENVIRONMENT = "AH_SITE_ENVIRONMENT"
AH_REALM = "AH_REALM"
AH_NON_PRODUCTION = "AH_NON_PRODUCTION"
AH_APPLICATION_UUID = "AH_APPLICATION_UUID"

AH_FILES_ROOT = "/mnt/files"
ACSF_SITES_JSON = Path("files-private") / "sites.json"
ACSF_DB_NAME_KEY = "acsf_db_name"

DEVCLOUD_REALM = "devcloud"
SITES_DIR_PREFIX = "sites/"

# ACE prod is 'prod'; ACSF can be '01live', '02live', ...
PROD_ENV_NAME = "prod"
LIVE_ENV_PATTERN = re.compile(r"[0-9]*live")
# ACE staging is 'test', 'stg' or 'stage'; ACSF is '01test', '02test', ...
STAGE_ENV_NAMES = ("stg", "stage")
TEST_ENV_PATTERN = re.compile(r"[0-9]*test")
# ACE dev is 'dev', 'dev1', ...; ACSF dev is '01dev', '02dev', ...
DEV_ENV_PATTERN = re.compile(r"[0-9]*dev[0-9]*")
# CDEs (formerly ODEs) are 'ode1', 'ode2', ...
ODE_ENV_PATTERN = re.compile(r"ode[0-9]*")
IDE_ENV_NAME = "ide"

LOG_FILE_ENV = "DRUPAL_ENV_DETECTOR_LOG_FILE"
