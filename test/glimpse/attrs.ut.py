# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from glimpse import Div, Input, is_empty_attr_val
from glimpse.tag import attr_key_for_kw
from utest import utest, utest_call, utest_seq, utest_val


utest(True, is_empty_attr_val, None)
utest(True, is_empty_attr_val, False)
utest(True, is_empty_attr_val, '')
utest(True, is_empty_attr_val, [])
utest(True, is_empty_attr_val, ())
utest(True, is_empty_attr_val, {})
utest(False, is_empty_attr_val, 0)
utest(False, is_empty_attr_val, 0.0)
utest(False, is_empty_attr_val, '0')
utest(False, is_empty_attr_val, True)
utest(False, is_empty_attr_val, ' ')
utest(False, is_empty_attr_val, ['a'])
utest(False, is_empty_attr_val, Div())

utest('for', attr_key_for_kw, 'for_')
utest('data-id', attr_key_for_kw, 'data_id')
utest('aria-label', attr_key_for_kw, 'aria_label_')


@utest_call
def test_set_get() -> None:
  d = Div()
  utest(False, d.has_attribute, 'id')
  utest(None, d.get_attribute, 'id')
  utest('x', d.get_attribute, 'id', 'x')
  d.set_attribute('id', 'a').set_attribute('title', 't').set_attribute('id', 'b')
  utest('b', d.get_attribute, 'id')
  utest_seq(['id', 'title'], d.get_attributes)
  utest('<div id="b" title="t"></div>', d.render_str)


@utest_call
def test_set_or_remove() -> None:
  d = Div(id='x')
  d.set_or_remove_attribute('id', '')
  utest(False, d.has_attribute, 'id')
  d.set_or_remove_attribute('id', 'y')
  utest('y', d.get_attribute, 'id')
  d.set_or_remove_attribute('id', None)
  utest(False, d.has_attribute, 'id')
  d.set_or_remove_attribute('tabindex', 0)
  utest(0, d.get_attribute, 'tabindex')
  d.set_or_remove_attribute('tabindex', [])
  utest(False, d.has_attribute, 'tabindex')
  d.set_or_remove_attribute('hidden', False)
  utest(False, d.has_attribute, 'hidden')


@utest_call
def test_remove() -> None:
  d = Div(id='x')
  d.remove_attribute('missing')
  d.remove_attribute('id')
  utest(False, d.has_attribute, 'id')
  utest({}, d.get_attributes)


@utest_call
def test_set_attributes() -> None:
  d = Div(id='x', title='t')
  d.set_attributes({'role': 'main', 'class': 'a b'})
  utest({'role': 'main', 'class': 'a b'}, d.get_attributes)
  utest_seq(['a', 'b'], d.get_classes)
  utest('<div role="main" class="a b"></div>', d.render_str)


@utest_call
def test_add_attributes() -> None:
  d = Div(id='x', title='t')
  d.add_attributes({'id': 'y', 'role': 'main', 'hidden': ''})
  utest({'id': 'x', 'title': 't', 'role': 'main'}, d.get_attributes)
  d.add_attributes({'id': 'y', 'title': ''}, overwrite=True)
  utest({'id': 'y', 'role': 'main'}, d.get_attributes)


@utest_call
def test_id() -> None:
  d = Div()
  utest(None, d.get_id)
  d.set_id('main')
  utest('main', d.get_id)
  d.set_id('')
  utest(False, d.has_attribute, 'id')


@utest_call
def test_classes() -> None:
  d = Div()
  utest_seq([], d.get_classes)
  utest(False, d.has_class, 'a')

  d.add_class('a')
  d.add_class('a')
  utest_seq(['a'], d.get_classes)

  d = Div()
  d.add_class(['a', 'b'])
  d.remove_class('a')
  utest_seq(['b'], d.get_classes)

  d = Div()
  d.add_class('a', 'b', ['c', ['d', 'e']], None, '')
  utest_seq(['a', 'b', 'c', 'd', 'e'], d.get_classes)
  utest(True, d.has_class, 'c')
  d.remove_class(['a', 'c'], 'missing')
  utest_seq(['b', 'd', 'e'], d.get_classes)
  utest('b d e', d.get_attribute, 'class')

  d = Div()
  d.add_class('x  y')
  utest_seq(['x', 'y'], d.get_classes)
  d.remove_class('x y')
  utest_seq([], d.get_classes)
  utest('<div></div>', d.render_str)

  d = Div()
  d.set_or_remove_attribute('class', 'p q')
  utest_seq(['p', 'q'], d.get_classes)
  d.set_or_remove_attribute('class', [])
  utest(False, d.has_attribute, 'class')
  d.remove_class('p')
  utest_seq([], d.get_classes)


@utest_call
def test_copy_from() -> None:
  src = Div(['a', 'b'], id='s', cl='c1')
  dst = Div('old', title='old')
  dst.copy_from(src)
  utest('<div id="s" class="c1">ab</div>', dst.render_str)
  # Copies are not shared.
  dst.add_class('c2').append_content('c').set_attribute('id', 'd')
  utest('<div id="s" class="c1">ab</div>', src.render_str)
  utest('<div id="d" class="c1 c2">abc</div>', dst.render_str)
  dup = src.copy()
  utest_val(True, type(dup) is Div, 'copy type')
  utest('<div id="s" class="c1">ab</div>', dup.render_str)


@utest_call
def test_class_scalars() -> None:
  utest_seq(['5'], Div().add_class(5).get_classes)
  utest_seq(['a', '5'], Div().add_class(['a', 5]).get_classes)
  utest_seq(['a', '2'], Div().add_class(['a', [2.0, None, True]]).get_classes)
  utest_seq([], Div().set_attribute('class', True).get_classes)
  utest_seq([], Div().add_class(False, None).get_classes)
  utest_seq(['3'], Div().add_attributes({'class': 3}).get_classes)
  utest_seq(['x', 'y'], Div().add_class({'x': None, 'y': None}).get_classes)
  utest('<input />', Input(cl=True).render_str)
  utest('<div class="7"></div>', Div(cl=7).render_str)
  d = Div(cl=['a', 5])
  d.remove_class(5)
  utest_seq(['a'], d.get_classes)
