import pandas as pd
import matplotlib.pyplot as plt
import re
from typing import List, Dict
from matplotlib import collections  as mc

def parse_logs(filename: str) -> List[Dict]:

    log_entry = re.compile(r"""
        (?P<datetime>\d+-\d+-\d+ \s+ \d+:\d+:\d+,\d+) \s+
        (?P<process_id>(Process-\d+|MainProcess)) \s+
        (?P<heap_name>(\w|\.)+) \s+
        (?P<loglevel>\w+) \s+
        (?P<operation>insert|remove) ,\s+
        (?P<t_start>\d+\.\d+) ,\s+
        (?P<t_stop>\d+\.\d+) ,\s+
        (?P<size>\d+)
        """, re.VERBOSE)

    with open(filename, 'r') as f:
        content = f.read()
        entries = [e.groupdict() for e in log_entry.finditer(content)]

    return entries

def logs_to_dataframe(entries: List[Dict]) -> pd.DataFrame:

    data = pd.DataFrame(entries)
    data = data.astype({
        'datetime': 'str',
        'process_id': 'str',
        'heap_name': 'str',
        'loglevel': 'str',
        'operation': 'str',
        't_start': 'float64',
        't_stop': 'float64',
        'size': 'int64'
    })
    data['datetime'] = pd.to_datetime(data['datetime'], format='%Y-%m-%d %H:%M:%S,%f')

    # shift absolute timings to start at zero
    min_timestamp = min(data['t_start'])
    data['t_start'] = data['t_start'] - min_timestamp
    data['t_stop'] = data['t_stop'] - min_timestamp
    data['duration'] = data['t_stop'] - data['t_start']

    return data

def plot_logs(filename: str) -> None:

    # get entries using regexp
    data = logs_to_dataframe(parse_logs(filename))

    col = {}
    col['insert'] = 'g'
    col['remove'] = 'r'
    heaps = data['heap_name'].unique()
    operations = data['operation'].unique()

    fig, (ax_size, ax_ops) = plt.subplots(2, 1, sharex=True)

    # number of elements after each operation
    for heap in heaps:
        df = data[data['heap_name'] == heap]
        ax_size.step(df['t_stop'], df['size'], where='post', label=heap)
    ax_size.set_ylabel('size')
    ax_size.legend()

    # time spent in each operation
    y = 0
    yticks = []
    for heap in heaps:
        y += 1
        yticks.append(y)
        for operation in operations:
            df = data[(data['heap_name'] == heap) & (data['operation'] == operation)]
            lines = [[(x0,y),(x1,y)] for x0,x1 in zip(df['t_start'], df['t_stop'])]
            collection = mc.LineCollection(lines, colors=col[operation])
            ax_ops.add_collection(collection)
    ax_ops.autoscale()
    ax_ops.set_yticks(yticks, heaps)
    ax_ops.set_xlabel('time (ms)')
    plt.show()
