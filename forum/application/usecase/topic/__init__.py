"""Topic use cases."""

from .create_topic import CreateTopicRequest, CreateTopicResponse, CreateTopicUseCase
from .delete_topic import DeleteTopicRequest, DeleteTopicResponse, DeleteTopicUseCase
from .get_topic import GetTopicRequest, GetTopicResponse, GetTopicUseCase
from .list_topics import ListTopicsRequest, ListTopicsResponse, ListTopicsUseCase

__all__ = [
    "CreateTopicRequest",
    "CreateTopicResponse",
    "CreateTopicUseCase",
    "DeleteTopicRequest",
    "DeleteTopicResponse",
    "DeleteTopicUseCase",
    "GetTopicRequest",
    "GetTopicResponse",
    "GetTopicUseCase",
    "ListTopicsRequest",
    "ListTopicsResponse",
    "ListTopicsUseCase",
]
