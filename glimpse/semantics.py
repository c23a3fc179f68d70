# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
HTML semantics data.
'''

# Tags that render in the self-closed form `<br />` when they have no content.
# This set is part of the rendering contract and is not configurable.
self_closing_tags = frozenset({
  'area',
  'base',
  'br',
  'col',
  'command', # Obsolete.
  'embed',
  'frame', # Obsolete.
  'hr',
  'img',
  'input',
  'keygen', # Obsolete.
  'link',
  'meta',
  'param',
  'source',
  'track',
  'wbr',
})


# The catalogue of concrete tag types: (type name, tag name).
# `Option` is defined separately in `glimpse.tags` because its initializer takes a `value`.
tag_catalogue:tuple[tuple[str,str],...] = (
  # Containers and sectioning.
  ('Div', 'div'),
  ('Span', 'span'),
  ('Section', 'section'),
  ('Article', 'article'),
  ('Header', 'header'),
  ('Footer', 'footer'),
  ('Nav', 'nav'),
  ('Aside', 'aside'),
  ('Main', 'main'),
  ('Figure', 'figure'),
  ('FigureCaption', 'figcaption'),

  # Text.
  ('Paragraph', 'p'),
  ('CodeBlock', 'code'),
  ('PreformattedText', 'pre'),
  ('BoldText', 'b'),
  ('StrongText', 'strong'),
  ('EmphasizedText', 'em'),
  ('ItalicText', 'i'),
  ('HeadingOne', 'h1'),
  ('HeadingTwo', 'h2'),
  ('HeadingThree', 'h3'),
  ('HeadingFour', 'h4'),
  ('HeadingFive', 'h5'),
  ('HeadingSix', 'h6'),
  ('Caption', 'caption'),
  ('Citation', 'cite'),
  ('DeletedText', 'del'),
  ('InsertedText', 'ins'),
  ('MarkedText', 'mark'),
  ('QuotedText', 'q'),
  ('SubscriptText', 'sub'),
  ('SuperscriptText', 'sup'),
  ('SmallText', 'small'),
  ('BlockQuote', 'blockquote'),

  # Links and media.
  ('Link', 'a'),
  ('Image', 'img'),
  ('LineBreak', 'br'),
  ('HorizontalRule', 'hr'),

  # Lists.
  ('OrderedList', 'ol'),
  ('UnorderedList', 'ul'),
  ('ListItem', 'li'),
  ('DescriptionList', 'dl'),
  ('DescriptionTerm', 'dt'),
  ('DescriptionDetails', 'dd'),

  # Tables.
  ('Table', 'table'),
  ('TableHead', 'thead'),
  ('TableBody', 'tbody'),
  ('TableFooter', 'tfoot'),
  ('TableRow', 'tr'),
  ('TableCell', 'td'),
  ('TableHeading', 'th'),

  # Forms.
  ('Form', 'form'),
  ('FieldSet', 'fieldset'),
  ('Legend', 'legend'),
  ('Label', 'label'),
  ('Input', 'input'),
  ('Button', 'button'),
  ('Select', 'select'),
  ('OptionGroup', 'optgroup'),
  ('TextArea', 'textarea'),

  # Document metadata.
  ('Meta', 'meta'),
  ('Script', 'script'),
  ('Style', 'style'),
)
