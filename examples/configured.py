import logging
import os

import cantus
import cantus.errors

logging.basicConfig(level=logging.INFO)

# Reads control_flow.max_loop_iterations and logging.level from YAML.
CONFIG_PATH = os.path.join(os.path.dirname(__file__), "cantus.yaml")

settings = cantus.configure_from_file(CONFIG_PATH)

logging.info(f"Loop limit: {settings.max_loop_iterations}")

voices = cantus.numseq([0, 4, 7, 11, 14, 17])

# Split one line into two voices and weave them back the other way round.
upper, lower = voices.untwine(2)

logging.info(f"Upper: {upper.to_numeric_values()}  Lower: {lower.to_numeric_values()}")
logging.info(f"Rewoven: {lower.twine(upper).to_numeric_values()}")

# A loop whose condition never fails is stopped by the configured limit.
try:
	voices.while_(lambda s: True).do(lambda s: s.transpose(1))
except cantus.errors.LoopLimitExceeded as e:
	logging.warning(f"Stopped: {e}")
