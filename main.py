import logging

import uvicorn

from magics_api.app import create_app
from magics_api.core.env import get_log_level, get_port

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=get_port())
