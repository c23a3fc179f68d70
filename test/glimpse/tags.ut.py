# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import glimpse
from glimpse import escape, Option, Paragraph, Tag
from glimpse.semantics import tag_catalogue
from glimpse.tags import tag_types
from utest import utest, utest_call, utest_exc, utest_seq, utest_val


# Every catalogue entry renders its tag name, through both construction and `create`.
for name, tag in tag_catalogue:
  TagType = getattr(glimpse, name)
  utest(tag, getattr, TagType, 'tag')
  utest_val(TagType, Tag.tag_types[tag], f'registered: {tag}')
  utest(f'<{tag}>Test</{tag}>', lambda T: T('Test').render_str(), TagType)
  utest(f'<{tag}>Test</{tag}>', lambda T: T.create('Test').render_str(), TagType)

utest('<p>a</p><p>b</p><p>c</p>', escape, Paragraph.collection(['a', 'b', 'c']))

utest_exc(AttributeError, getattr, glimpse, 'NoSuchTag')
utest_exc(ValueError, Tag)


@utest_call
def test_collection_passthrough() -> None:
  p = Paragraph('b', id='keep')
  ps = Paragraph.collection(['a', p])
  utest_val(True, ps[1] is p, 'existing instance is kept')
  utest('<p>a</p><p id="keep">b</p>', escape, ps)


@utest_call
def test_for_tag() -> None:
  Widget = Tag.for_tag('x-widget')
  utest_val(True, Widget is Tag.for_tag('x-widget'), 'for_tag caches the generic type')
  utest('XWidgetTag', getattr, Widget, '__name__')
  utest('<x-widget a="1">w</x-widget>', lambda: Widget('w', a=1).render_str())
  utest_val(True, Tag.for_tag('div') is tag_types['Div'], 'for_tag returns catalogue types')


@utest_call
def test_option() -> None:
  utest('<option value="v">Label</option>', lambda: Option('Label', value='v').render_str())
  utest('<option value="0">Zero</option>', lambda: Option('Zero', value=0).render_str())
  utest('<option>Label</option>', lambda: Option('Label').render_str())
  utest('<option>Label</option>', lambda: Option('Label', value='').render_str())
  utest('<option selected value="a&amp;b">x</option>', lambda: Option('x', 'a&b', selected=True).render_str())
  utest_val(True, Tag.for_tag('option') is Option, 'Option is registered')

  utest('<option value="r">Red</option><option value="g">Green</option>',
    escape, Option.collection({'r': 'Red', 'g': 'Green'}))
  utest('<option>Red</option><option>Green</option>', escape, Option.collection(['Red', 'Green']))
  o = Option('Blue', value='b')
  utest_seq([o], Option.collection, {'x': o})
