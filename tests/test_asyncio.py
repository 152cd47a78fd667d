import asyncio
import logging

import pytest

import yairc.util

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)


def test_create_task_logs_exception(caplog):

    class hello2exc(Exception):
        pass

    async def hello2():
        await asyncio.sleep(0.01)
        raise hello2exc('oops')

    async def main():
        hello2_task = yairc.util.create_task(hello2(), logger=logger, message='hi %s', message_args=('there',))
        sleep_task = yairc.util.create_task(asyncio.sleep(5), logger=logger, message='sleep')
        done, pending = await asyncio.wait([sleep_task, hello2_task], return_when=asyncio.FIRST_COMPLETED)
        assert hello2_task in done
        assert sleep_task in pending
        with pytest.raises(hello2exc):
            hello2_task.result()

        for task in pending:
            task.cancel()
        await asyncio.sleep(0)

    ioloop = yairc.util.create_loop()
    try:
        ioloop.run_until_complete(main())
    finally:
        ioloop.close()

    assert 'hi there' in caplog.text
    # cancelled tasks are not errors
    assert [r.getMessage() for r in caplog.records if r.name == __name__] == ['hi there']


def test_loop_exception_handler(caplog):

    def boom():
        raise RuntimeError('crash and burn')

    async def main(ioloop):
        ioloop.call_soon(boom)
        await asyncio.sleep(0.01)

    ioloop = yairc.util.create_loop()
    try:
        ioloop.run_until_complete(main(ioloop))
    finally:
        ioloop.close()

    assert 'crash and burn' in caplog.text
