from .sink import NotificationSink, OutboundMessage, report_ready_message

__all__ = ["NotificationSink", "OutboundMessage", "report_ready_message"]
