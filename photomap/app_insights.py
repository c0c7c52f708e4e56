"""
Application Insights integration for clustering telemetry.
"""
import os
import logging
from typing import Optional
from opencensus.ext.azure import metrics_exporter
from opencensus.ext.azure.log_exporter import AzureLogHandler
from opencensus.stats import aggregation as aggregation_module
from opencensus.stats import measure as measure_module
from opencensus.stats import stats as stats_module
from opencensus.stats import view as view_module
from opencensus.tags import tag_map as tag_map_module

logger = logging.getLogger(__name__)


class AppInsights:
    """Application Insights telemetry client."""

    def __init__(self, connection_string: Optional[str] = None):
        """Initialize Application Insights if a connection string is available."""
        self.connection_string = connection_string or os.getenv("APPLICATIONINSIGHTS_CONNECTION_STRING")
        self.enabled = bool(self.connection_string)

        if self.enabled:
            self._setup_logging()
            self._setup_metrics()
        else:
            logger.debug("Application Insights not configured (missing connection string)")

    def _setup_logging(self):
        """Configure Azure Log Handler on the package logger."""
        logging.getLogger("photomap").addHandler(
            AzureLogHandler(connection_string=self.connection_string)
        )
        logger.info("Application Insights logging enabled")

    def _setup_metrics(self):
        self.stats = stats_module.stats
        self.view_manager = self.stats.view_manager

        self.photos_clustered = measure_module.MeasureInt(
            "photos_clustered",
            "Number of photos passed through a clustering pass",
            "photos"
        )

        self.clusters_created = measure_module.MeasureInt(
            "clusters_created",
            "Number of cluster markers produced",
            "clusters"
        )

        self.photos_filtered = measure_module.MeasureInt(
            "photos_filtered",
            "Number of photos dropped for missing coordinates",
            "photos"
        )

        self.clustering_time = measure_module.MeasureFloat(
            "clustering_time",
            "Clustering pass duration",
            "ms"
        )

        views = [
            view_module.View(
                "photos_clustered_view",
                "Photos per clustering pass",
                [],
                self.photos_clustered,
                aggregation_module.LastValueAggregation()
            ),
            view_module.View(
                "clusters_created_view",
                "Clusters per clustering pass",
                [],
                self.clusters_created,
                aggregation_module.LastValueAggregation()
            ),
            view_module.View(
                "photos_filtered_view",
                "Photos without usable coordinates",
                [],
                self.photos_filtered,
                aggregation_module.SumAggregation()
            ),
            view_module.View(
                "clustering_time_view",
                "Clustering pass duration",
                [],
                self.clustering_time,
                aggregation_module.LastValueAggregation()
            ),
        ]
        for view in views:
            self.view_manager.register_view(view)

        exporter = metrics_exporter.new_metrics_exporter(
            connection_string=self.connection_string
        )
        self.view_manager.register_exporter(exporter)

        logger.info("Application Insights metrics enabled")

    def track_clustering_pass(self, photo_count: int, cluster_count: int, elapsed_ms: float):
        """Record one clustering pass."""
        if self.enabled:
            mmap = self.stats.stats_recorder.new_measurement_map()
            tmap = tag_map_module.TagMap()
            mmap.measure_int_put(self.photos_clustered, photo_count)
            mmap.measure_int_put(self.clusters_created, cluster_count)
            mmap.measure_float_put(self.clustering_time, elapsed_ms)
            mmap.record(tmap)
            logger.debug(f"Tracked: {photo_count} photos -> {cluster_count} clusters in {elapsed_ms:.2f}ms")

    def track_photos_filtered(self, count: int):
        """Track number of photos dropped by the coordinate filter."""
        if self.enabled:
            mmap = self.stats.stats_recorder.new_measurement_map()
            tmap = tag_map_module.TagMap()
            mmap.measure_int_put(self.photos_filtered, count)
            mmap.record(tmap)
            logger.debug(f"Tracked: {count} photos without coordinates")

    def track_event(self, event_name: str, properties: Optional[dict] = None):
        """Track custom event."""
        if self.enabled:
            props = properties or {}
            logger.info(f"Event: {event_name}", extra={"custom_dimensions": props})

    def track_exception(self, exception: Exception):
        """Track exception."""
        if self.enabled:
            logger.exception(f"Exception occurred: {str(exception)}")


# Global instance
app_insights = AppInsights()
