from __future__ import annotations
from dotenv import load_dotenv
load_dotenv()  # Load .env file before importing phyphox_client modules

import time
import logging

from phyphox_client.config import PHYPHOX_ADDRESS, PHYPHOX_LOG_LEVEL, PHYPHOX_POLL_INTERVAL_S
from phyphox_client.exceptions import PhyphoxError
from phyphox_client.phyphox import Phyphox

logging.basicConfig(
    level=PHYPHOX_LOG_LEVEL,
    format='%(levelname)s: %(name)s: %(message)s'
)

logger = logging.getLogger(__name__)


def main() -> None:
    phy = Phyphox(PHYPHOX_ADDRESS)

    light = phy.light()
    magnetometer = phy.magnetometer()

    light.register()
    magnetometer.register_x()
    magnetometer.register_y()
    magnetometer.register_z()

    # give the sensors a moment to fill their buffers
    phy.start()
    time.sleep(PHYPHOX_POLL_INTERVAL_S)

    try:
        while True:
            try:
                phy.retrieve()
            except PhyphoxError as e:
                logger.error(f"Poll failed: {e}")
            else:
                logger.info(f"light={light.value()} mag={magnetometer.vector()}")
            time.sleep(PHYPHOX_POLL_INTERVAL_S)
    except KeyboardInterrupt:
        logger.info("Shutdown requested by user.")
    finally:
        try:
            phy.stop()
        except PhyphoxError as e:
            logger.error(f"Could not stop experiment: {e}")


if __name__ == "__main__":
    main()
