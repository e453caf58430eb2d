# config
CONFIG_EPSILON_KEY = "epsilon"
CONFIG_SNIFF_MEDIATYPE_KEY = "sniff_mediatype"
CONFIG_COMPRESS_LOGS_KEY = "compress_logs"

# env
ENV_EPSILON_KEY = "MINIFY_EPSILON"
ENV_SNIFF_MEDIATYPE_KEY = "MINIFY_SNIFF_MEDIATYPE"
ENV_COMPRESS_LOGS_KEY = "MINIFY_COMPRESS_LOGS"
