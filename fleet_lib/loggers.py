"""
Loggers Module - Log sinks the Fleet can report to

Sinks: console, file and AWS CloudWatch Logs.
"""

import logging
import os
import sys
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, TextIO

import boto3
from botocore.exceptions import ClientError

DEFAULT_LOG_FILE = 'log.txt'
DEFAULT_AWS_REGION = 'eu-west-1'
DEFAULT_LOG_GROUP = '/fleet-app/logs'


class FleetLogger(ABC):
    """Anything that accepts a log message"""

    @abstractmethod
    def log(self, message: str) -> None:
        """Record a single message"""


class ConsoleLogger(FleetLogger):
    """Writes messages to the console"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def log(self, message: str) -> None:
        print(f"[Console] {message}", file=self.stream)


class FileLogger(FleetLogger):
    """Appends messages to a text file"""

    def __init__(self, filename: str = DEFAULT_LOG_FILE):
        self.filename = filename
        self._file = open(filename, 'a', encoding='utf-8')

    def log(self, message: str) -> None:
        if not self._file.closed:
            self._file.write(f"[File] {message}\n")
            self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


class CloudWatchLogger(FleetLogger):
    """Ships messages to an AWS CloudWatch log group"""

    def __init__(self, log_group: str = DEFAULT_LOG_GROUP, log_stream: Optional[str] = None,
                 client=None, region_name: str = DEFAULT_AWS_REGION, level: str = 'INFO'):
        self.log_group = log_group
        self.log_stream = log_stream or f"fleet-{datetime.now(timezone.utc).strftime('%Y-%m-%d')}"
        self.client = client or boto3.client('logs', region_name=region_name)
        self.level = level
        self._stream_ready = False

    def _ensure_stream(self):
        """Create the log stream once; an existing stream is fine"""
        if self._stream_ready:
            return
        try:
            self.client.create_log_stream(
                logGroupName=self.log_group,
                logStreamName=self.log_stream
            )
        except self.client.exceptions.ResourceAlreadyExistsException:
            pass
        self._stream_ready = True

    def log(self, message: str) -> None:
        try:
            self._ensure_stream()
            now = datetime.now(timezone.utc)
            self.client.put_log_events(
                logGroupName=self.log_group,
                logStreamName=self.log_stream,
                logEvents=[{
                    'timestamp': int(now.timestamp() * 1000),
                    'message': f"[{self.level}] {now.isoformat()} - {message}"
                }]
            )
        except ClientError as e:
            logging.error(f"CloudWatch error: {e}")


class LoggerType(Enum):
    CONSOLE = 'console'
    FILE = 'file'
    CLOUDWATCH = 'cloudwatch'


class LoggerFactory:
    """Builds a log sink by type"""

    @staticmethod
    def create_logger(kind, **options) -> FleetLogger:
        """Create a logger; `kind` is a LoggerType or its string value"""
        try:
            kind = LoggerType(kind)
        except ValueError:
            raise ValueError(f"Unknown logger type: {kind!r}") from None

        if kind is LoggerType.CONSOLE:
            return ConsoleLogger(**options)
        if kind is LoggerType.FILE:
            return FileLogger(**options)
        return CloudWatchLogger(**options)

    @classmethod
    def from_environment(cls, environ=None) -> FleetLogger:
        """Create the logger selected by FLEET_LOGGER (console by default)"""
        environ = os.environ if environ is None else environ
        kind = environ.get('FLEET_LOGGER', LoggerType.CONSOLE.value).lower()

        if kind == LoggerType.FILE.value:
            return cls.create_logger(kind, filename=environ.get('FLEET_LOG_FILE', DEFAULT_LOG_FILE))
        if kind == LoggerType.CLOUDWATCH.value:
            return cls.create_logger(
                kind,
                log_group=environ.get('CLOUDWATCH_LOG_GROUP', DEFAULT_LOG_GROUP),
                region_name=environ.get('AWS_REGION', DEFAULT_AWS_REGION)
            )
        return cls.create_logger(kind)
