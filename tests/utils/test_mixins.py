import re

from geomeasure.utils.mixins import LoggingMixin


class Foo(LoggingMixin):
    pass


class Bar(LoggingMixin):
    pass


def test_logger_name():
    assert Foo().logger.name == 'geomeasure.Foo'
    assert Foo('sub').logger.name == 'geomeasure.Foo.sub'


def test_warn_once(caplog):
    foo = Foo()
    foo.warn_once('mixin %s', 'test')
    assert 'mixin test' in caplog.text

    bar = Bar()
    bar.warn_once('mixin %s', 'test')
    assert len(re.findall('mixin test', caplog.text)) == 1
