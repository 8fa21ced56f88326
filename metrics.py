"""
Metrics - optional CloudWatch counters.
Never changes a directive outcome.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional

import boto3

logger = logging.getLogger(__name__)


class MetricsPublisher:
    """CloudWatch publisher; a no-op when no namespace is configured"""

    def __init__(self, namespace: Optional[str], region: Optional[str] = None):
        self.namespace = namespace
        self.cloudwatch = None

        if not namespace:
            return

        try:
            self.cloudwatch = boto3.client('cloudwatch', region_name=region)
        except Exception as e:
            logger.warning(f"CloudWatch client init failed: {e}")
            self.cloudwatch = None

    @property
    def enabled(self) -> bool:
        return self.cloudwatch is not None

    def publish(self, metric_name: str, value: float = 1, unit: str = 'Count',
                dimensions: Optional[Dict[str, str]] = None) -> None:
        """Publish one datapoint; failures are logged, not raised"""
        if not self.cloudwatch:
            return

        datum = {
            'MetricName': metric_name,
            'Value': value,
            'Unit': unit,
            'Timestamp': datetime.now(timezone.utc)
        }
        if dimensions:
            datum['Dimensions'] = [
                {'Name': name, 'Value': dim_value}
                for name, dim_value in dimensions.items()
            ]

        try:
            self.cloudwatch.put_metric_data(
                Namespace=self.namespace,
                MetricData=[datum]
            )
        except Exception as e:
            logger.error(f"CloudWatch publish failed: {e}")
