import unittest
import os
import tempfile
from heap_tools.log_tools import parse_logs, logs_to_dataframe

LOG_CONTENT = (
    "2024-03-01 10:00:00,100 MainProcess minheap INFO insert, 1000.5, 1000.75, 1\n"
    "2024-03-01 10:00:00,101 MainProcess minheap INFO insert, 1001.0, 1001.5, 2\n"
    "2024-03-01 10:00:00,102 Process-1 maxheap INFO insert, 1002.0, 1002.25, 1\n"
    "some unrelated line\n"
    "2024-03-01 10:00:00,103 MainProcess minheap INFO remove, 1003.0, 1004.0, 1\n"
)

class TestLogTools(unittest.TestCase):

    def setUp(self):
        fd, self.filename = tempfile.mkstemp(suffix='.log')
        with os.fdopen(fd, 'w') as f:
            f.write(LOG_CONTENT)

    def tearDown(self):
        os.remove(self.filename)

    def test_parse_logs(self):
        entries = parse_logs(self.filename)
        self.assertEqual(len(entries), 4)
        self.assertEqual(entries[0]['heap_name'], 'minheap')
        self.assertEqual(entries[0]['operation'], 'insert')
        self.assertEqual(entries[2]['process_id'], 'Process-1')
        self.assertEqual(entries[3]['operation'], 'remove')
        self.assertEqual(entries[3]['size'], '1')

    def test_logs_to_dataframe(self):
        data = logs_to_dataframe(parse_logs(self.filename))
        self.assertEqual(len(data), 4)
        self.assertAlmostEqual(data['t_start'].iloc[0], 0.0)
        self.assertAlmostEqual(data['t_stop'].iloc[3], 3.5)
        self.assertAlmostEqual(data['duration'].iloc[3], 1.0)
        self.assertEqual(list(data['size']), [1, 2, 1, 1])
        self.assertEqual(sorted(data['heap_name'].unique()), ['maxheap', 'minheap'])

if __name__ == '__main__':
    unittest.main()
