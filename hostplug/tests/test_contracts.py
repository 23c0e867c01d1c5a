from typing import Optional, TypeVar, Union

import pytest

from hostplug.core import ExtensibleHost, PluginContractError, PluginFor, plugin_hosts
from hostplug.core.contracts import check_host_for, check_plugin_type

HostT = TypeVar("HostT")


class Document(ExtensibleHost):
    def __init__(self, text: str = "") -> None:
        super().__init__()
        self.text = text


class Spreadsheet(ExtensibleHost):
    pass


class WordCount(PluginFor[Document]):
    def __init__(self, words: int) -> None:
        self.words = words

    @classmethod
    def create(cls, host: Document) -> Optional["WordCount"]:
        return cls(len(host.text.split()))


class SizeHint(PluginFor[Union[Document, Spreadsheet]]):
    @classmethod
    def create(cls, host) -> Optional["SizeHint"]:
        return cls()


class PipeHint(PluginFor[Document | Spreadsheet]):
    @classmethod
    def create(cls, host) -> Optional["PipeHint"]:
        return cls()


class AnyHost(PluginFor[HostT]):
    @classmethod
    def create(cls, host) -> Optional["AnyHost"]:
        return cls()


class DuckTyped:
    @classmethod
    def create(cls, host) -> Optional["DuckTyped"]:
        return cls()


class DerivedWordCount(WordCount):
    pass


class Unfinished(PluginFor[Document]):
    pass


class NotAPlugin:
    pass


def test_plugin_hosts_reads_declared_host_types():
    assert plugin_hosts(WordCount) == (Document,)
    assert plugin_hosts(DerivedWordCount) == (Document,)
    assert plugin_hosts(SizeHint) == (Document, Spreadsheet)
    assert plugin_hosts(PipeHint) == (Document, Spreadsheet)


def test_plugin_hosts_is_empty_for_undeclared_hosts():
    assert plugin_hosts(AnyHost) == ()
    assert plugin_hosts(DuckTyped) == ()


def test_check_plugin_type_accepts_subclasses_and_duck_types():
    assert check_plugin_type(WordCount) is WordCount
    assert check_plugin_type(DuckTyped) is DuckTyped


def test_check_plugin_type_rejects_non_plugins():
    with pytest.raises(PluginContractError):
        check_plugin_type(NotAPlugin)

    with pytest.raises(PluginContractError):
        check_plugin_type(Unfinished)

    with pytest.raises(PluginContractError):
        check_plugin_type(WordCount(1))


def test_plugin_contract_error_is_a_type_error():
    with pytest.raises(TypeError):
        check_plugin_type("WordCount")


def test_check_host_for_rejects_undeclared_host():
    check_host_for(WordCount, Document("a b"))
    check_host_for(SizeHint, Spreadsheet())
    check_host_for(AnyHost, object())

    with pytest.raises(PluginContractError):
        check_host_for(WordCount, Spreadsheet())
