from contextlib import asynccontextmanager
import logging

from ats_engine.core.scoring import get_scoring_config
from ats_engine.taxonomy import get_default_taxonomy_provider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    # Read-only tables are loaded once so request handling never touches disk.
    get_scoring_config()
    taxonomy = get_default_taxonomy_provider()
    logger.info(
        "ats_engine_warmup taxonomy_version=%s categories=%s",
        taxonomy.version,
        ",".join(taxonomy.categories()),
    )
    yield
