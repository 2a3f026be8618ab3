from typing import List, Protocol, runtime_checkable

from .object import Object


@runtime_checkable
class StorageProtocol(Protocol):
    """Anything with the seven bucket/object operations of `StorageBackend`.

    Lets callers accept duck-typed stores (test doubles, wrappers) without
    requiring them to subclass the ABC.
    """

    def create_bucket(self, name: str) -> None: ...

    def list_buckets(self) -> List[str]: ...

    def get_bucket(self, name: str) -> None: ...

    def create_object(self, obj: Object) -> None: ...

    def list_objects(self, bucket_name: str) -> List[Object]: ...

    def get_object(self, bucket_name: str, name: str) -> Object: ...

    def delete_object(self, bucket_name: str, name: str) -> None: ...
