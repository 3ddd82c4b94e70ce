"""Field names of the torrent status schema.

These strings are the external contract. Adding, removing or renaming one
is a breaking change and requires bumping ``SCHEMA_VERSION``.
"""

from __future__ import annotations

SCHEMA_VERSION = 1

KEY_TORRENT_ID = "hash"
KEY_TORRENT_INFOHASHV1 = "infohash_v1"
KEY_TORRENT_INFOHASHV2 = "infohash_v2"
KEY_TORRENT_NAME = "name"

KEY_TORRENT_HAS_METADATA = "has_metadata"
KEY_TORRENT_CREATED_BY = "created_by"
KEY_TORRENT_CREATION_DATE = "creation_date"
KEY_TORRENT_PRIVATE = "private"
KEY_TORRENT_TOTAL_SIZE = "total_size"
KEY_TORRENT_PIECES_NUM = "pieces_num"
KEY_TORRENT_PIECE_SIZE = "piece_size"

KEY_TORRENT_MAGNET_URI = "magnet_uri"
KEY_TORRENT_SIZE = "size"
KEY_TORRENT_PROGRESS = "progress"
KEY_TORRENT_TOTAL_WASTED = "total_wasted"
KEY_TORRENT_PIECES_HAVE = "pieces_have"
KEY_TORRENT_DLSPEED = "dlspeed"
KEY_TORRENT_UPSPEED = "upspeed"
KEY_TORRENT_QUEUE_POSITION = "priority"
KEY_TORRENT_SEEDS = "num_seeds"
KEY_TORRENT_NUM_COMPLETE = "num_complete"
KEY_TORRENT_LEECHS = "num_leechs"
KEY_TORRENT_NUM_INCOMPLETE = "num_incomplete"

KEY_TORRENT_STATE = "state"
KEY_TORRENT_ETA = "eta"
KEY_TORRENT_SEQUENTIAL_DOWNLOAD = "seq_dl"
KEY_TORRENT_FIRST_LAST_PIECE_PRIO = "f_l_piece_prio"

KEY_TORRENT_CATEGORY = "category"
KEY_TORRENT_TAGS = "tags"
KEY_TORRENT_SUPER_SEEDING = "super_seeding"
KEY_TORRENT_FORCE_START = "force_start"
KEY_TORRENT_SAVE_PATH = "save_path"
KEY_TORRENT_DOWNLOAD_PATH = "download_path"
KEY_TORRENT_CONTENT_PATH = "content_path"
KEY_TORRENT_ROOT_PATH = "root_path"
KEY_TORRENT_ADDED_ON = "added_on"
KEY_TORRENT_COMPLETION_ON = "completion_on"
KEY_TORRENT_TRACKER = "tracker"
KEY_TORRENT_TRACKERS_COUNT = "trackers_count"
KEY_TORRENT_DL_LIMIT = "dl_limit"
KEY_TORRENT_UP_LIMIT = "up_limit"
KEY_TORRENT_AMOUNT_DOWNLOADED = "downloaded"
KEY_TORRENT_AMOUNT_UPLOADED = "uploaded"
KEY_TORRENT_AMOUNT_DOWNLOADED_SESSION = "downloaded_session"
KEY_TORRENT_AMOUNT_UPLOADED_SESSION = "uploaded_session"
KEY_TORRENT_AMOUNT_LEFT = "amount_left"
KEY_TORRENT_AMOUNT_COMPLETED = "completed"
KEY_TORRENT_CONNECTIONS_COUNT = "connections_count"
KEY_TORRENT_CONNECTIONS_LIMIT = "connections_limit"
KEY_TORRENT_MAX_RATIO = "max_ratio"
KEY_TORRENT_MAX_SEEDING_TIME = "max_seeding_time"
KEY_TORRENT_MAX_INACTIVE_SEEDING_TIME = "max_inactive_seeding_time"
KEY_TORRENT_RATIO = "ratio"
KEY_TORRENT_RATIO_LIMIT = "ratio_limit"
KEY_TORRENT_POPULARITY = "popularity"
KEY_TORRENT_SEEDING_TIME_LIMIT = "seeding_time_limit"
KEY_TORRENT_INACTIVE_SEEDING_TIME_LIMIT = "inactive_seeding_time_limit"
KEY_TORRENT_LAST_SEEN_COMPLETE_TIME = "seen_complete"
KEY_TORRENT_AUTO_TORRENT_MANAGEMENT = "auto_tmm"
KEY_TORRENT_TIME_ACTIVE = "time_active"
KEY_TORRENT_SEEDING_TIME = "seeding_time"
KEY_TORRENT_LAST_ACTIVITY_TIME = "last_activity"
KEY_TORRENT_AVAILABILITY = "availability"
KEY_TORRENT_REANNOUNCE = "reannounce"
KEY_TORRENT_COMMENT = "comment"
