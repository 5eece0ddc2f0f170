# logger.py
import logging
import os
from datetime import datetime
from typing import Optional
import psutil

class PlacementLogger:
    _instance: Optional['PlacementLogger'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(PlacementLogger, cls).__new__(cls)
            cls._instance._initialize_logger()
        return cls._instance

    def _initialize_logger(self):
        """Initialize the logger with a console handler; file logging is opt-in"""
        self.formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        self.logger = logging.getLogger('PlacementLogger')
        self.logger.setLevel(logging.DEBUG)
        self.log_file = None
        self._file_handler = None

        # Console handler (INFO and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(self.formatter)
        self.logger.addHandler(console_handler)

        if os.environ.get('TREND_BRAIN_LOG_FILE', '0') == '1':
            self.enable_file_logging()

    def enable_file_logging(self, log_dir: Optional[str] = None) -> str:
        """Attach a DEBUG file handler writing to a timestamped log file"""
        if self._file_handler is not None:
            return self.log_file

        log_dir = log_dir or os.environ.get('TREND_BRAIN_LOG_DIR', 'logs')
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        self.log_file = os.path.join(log_dir, f'placement_{timestamp}.log')

        self._file_handler = logging.FileHandler(self.log_file)
        self._file_handler.setLevel(logging.DEBUG)
        self._file_handler.setFormatter(self.formatter)
        self.logger.addHandler(self._file_handler)

        self.logger.info(f"Logger initialized. Log file: {self.log_file}")
        return self.log_file

    def disable_file_logging(self):
        """Detach and close the file handler, if any"""
        if self._file_handler is None:
            return
        self.logger.removeHandler(self._file_handler)
        self._file_handler.close()
        self._file_handler = None
        self.log_file = None

    @staticmethod
    def get_logger() -> logging.Logger:
        """Get the singleton logger instance"""
        if PlacementLogger._instance is None:
            PlacementLogger()
        return PlacementLogger._instance.logger

    def log_memory_usage(self):
        """Log current memory usage"""
        process = psutil.Process(os.getpid())
        memory_usage = process.memory_info().rss / 1024 / 1024  # Convert to MB
        self.logger.info(f"Current memory usage: {memory_usage:.2f} MB")

    def log_placement_report(self, report):
        """Log statistics about a finished placement"""
        stats = {
            "Requested neurons": report.requested,
            "Placed neurons": report.placed,
            "Regions": len(report.regions),
        }

        self.logger.info("Placement Statistics:")
        for key, value in stats.items():
            self.logger.info(f"  {key}: {value:,}")
        self.logger.info(f"  Min pairwise distance: {report.min_pairwise_distance:.3f}")
        for region in report.regions:
            self.logger.info(f"  {region.name}: {region.placed}/{region.quota}")
