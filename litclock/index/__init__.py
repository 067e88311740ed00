from .time_index import TimeIndex
