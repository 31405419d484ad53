# takebefore

`takebefore` gives you a lazy view over any iterable. The view yields
elements up to the first element equal to a delimiter value and stops
there, leaving that element out. If no element matches, the view yields
the whole iterable.

## Installation

```
pip install takebefore
```

## Usage

Call `take_before` directly with a source and a delimiter:

```python
from takebefore.view import take_before

list(take_before([10, 20, 30, 40], 30))   # [10, 20]
"".join(take_before("Hello?World", "?"))  # "Hello"
```

If you pass only the delimiter, you get a closure that you can pipe a
source into:

```python
from takebefore.view import take_before

view = [1, 2, 3, 4, 5] | take_before(3)
list(view)       # [1, 2]
view.front()     # 1
view.empty()     # False
bool(view)       # True
view.base()      # the underlying source, untouched
view.value()     # 3
```

`front()` raises `IndexError` when the view is empty. `take_before`
raises `TypeError` unless it gets one or two arguments, and a view raises
`TypeError` if its source is not iterable.

You can also build a `TakeBeforeView` directly. The view reads from its
base on every iteration, so you can walk a view over a list or a string
more than once:

```python
from takebefore.view import TakeBeforeView

view = TakeBeforeView("path/to/file.txt", "/")
"".join(view)    # "path"
"".join(view)    # "path" again
```

Scanning stops at the first match, so the source may be an endless
iterator. The view never reads elements past the delimiter. If the source
is a one-shot iterator, the view can be walked only once. `empty()`,
`front()` and `bool()` each consume elements from such an iterator.

`take_before(value)` returns a `TakeBeforeClosure`. You can call it on a
source or put it on the right of `|`.

## Demo

The package ships with a short demonstration:

```
takebefore-demo
```

It prints two results: a list cut before `30` with a direct call, and a
string cut before `'!'` with the pipe form. `takebefore.demo` also offers
these results as strings through `direct_usage()` and `pipe_usage()`.