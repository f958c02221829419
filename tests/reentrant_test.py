from __future__ import annotations
import typing
import unittest
import gc
import weakref

import set_path
from stream_test_base import *
from lookahead_lib.all import *


class ReentrantUngetTest(StreamTestBase):
    def make_stream(self, on_third: typing.Callable[[LookaheadStream], typing.Any]) -> LookaheadStream:
        """
        A stream over 1..5 whose producer calls `on_third` with the stream instead of returning 3
        """
        
        stream = LookaheadStream()
        handle = stream.proxy
        count = 0
        
        def produce() -> typing.Any:
            nonlocal count
            count += 1
            
            if count == 3:
                return on_third(handle)
            
            return count if count <= 5 else None
        
        stream.unget(produce)
        return stream
    
    def test_unget_then_return(self) -> None:
        def on_third(stream: LookaheadStream) -> str:
            stream.unget("x", "y", "z")
            return "w"
        
        self.check_stream(self.make_stream(on_third), [1, 2, "x", "y", "z", "w", 4, 5])
    
    def test_unget_producer_then_return(self) -> None:
        def on_third(stream: LookaheadStream) -> str:
            stream.unget("x", counter(10, 12), "y")
            return "w"
        
        self.check_stream(self.make_stream(on_third), [1, 2, "x", 10, 11, "y", "w", 4, 5])
    
    def test_unget_then_end(self) -> None:
        stream = LookaheadStream()
        handle = stream.proxy
        
        def produce() -> None:
            handle.unget(1, 2, 3)
            return None
        
        stream.unget(produce, 4)
        
        self.check_stream(stream, [1, 2, 3, 4])
    
    def test_unget_while_looking_ahead(self) -> None:
        def on_third(stream: LookaheadStream) -> str:
            stream.unget("x", "y", "z")
            return "w"
        
        stream = self.make_stream(on_third)
        
        # Values already realized when the producer runs stay behind the ungotten ones
        self.assertEqual(stream.peek(4), 2)
        self.check_stream(stream, ["x", "y", "z", 1, 2, "w", 4, 5])
    
    def test_unget_producer_while_looking_ahead(self) -> None:
        def on_third(stream: LookaheadStream) -> str:
            stream.unget(counter(10, 12))
            return "w"
        
        stream = self.make_stream(on_third)
        
        self.assertEqual(stream.peek(2), 1)
        self.check_stream(stream, [10, 11, 1, 2, "w", 4, 5])
    
    def test_original_example(self) -> None:
        stream = LookaheadStream()
        handle = stream.proxy
        done = False
        
        def produce() -> typing.Any:
            nonlocal done
            
            if done:
                return None
            
            done = True
            handle.unget(1, 2, 3)
            return 4
        
        stream.unget(produce)
        
        self.check_stream(stream, [1, 2, 3, 4])


class ReferenceTest(unittest.TestCase):
    def test_stream_is_released(self) -> None:
        def make() -> LookaheadStream:
            stream = LookaheadStream()
            handle = stream.proxy
            
            def produce() -> None:
                handle.unget("late")
                return None
            
            stream.unget(1, produce)
            return stream
        
        stream = make()
        self.assertEqual(stream.next(), 1)
        
        ref = weakref.ref(stream)
        del stream
        gc.collect()
        
        self.assertIsNone(ref())
    
    def test_proxy_behaves_like_stream(self) -> None:
        stream = LookaheadStream(1, 2)
        handle = stream.proxy
        
        self.assertEqual(handle.peek(1), 2)
        self.assertEqual(handle.next(), 1)
        self.assertEqual(stream.next(), 2)


if __name__ == "__main__":
    unittest.main()
