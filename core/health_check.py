from core.log import logger
from core.store import RecordStore
from settings import DATABASE_URL
from sqlalchemy.engine import make_url


def health_check(store: RecordStore):
    logger.info("run app with")
    logger.info(f"database = {make_url(DATABASE_URL).render_as_string(hide_password=True)}")
    logger.info("try ping database")
    store.ping()
    logger.info("successfully connect to database")
