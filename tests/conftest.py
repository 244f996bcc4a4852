import os

# app.py reads this at import time; gevent monkey patching has no place in a test run.
os.environ["ASYNC_MODE"] = "threading"
