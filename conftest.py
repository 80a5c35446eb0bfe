# DEPENDENCIES
import os
import tempfile


# Keep test log files out of the working tree and never try to reach a model server
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix = "clause_engine_logs_"))
os.environ.setdefault("AI_EXTRACTION_ENABLED", "false")
