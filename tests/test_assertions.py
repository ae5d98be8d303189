import unittest

from g1.timezones.assertions import (
    Assertions,
    ASSERT,
)


class AssertionsTest(unittest.TestCase):

    def test_custom_exc_type(self):

        class CustomError(Exception):
            pass

        assertions = Assertions(CustomError)
        with self.assertRaises(CustomError):
            assertions.not_empty('')

    def test_assertion_methods_pass(self):
        checks = [
            ('__call__', (1, ''), 1),
            ('not_empty', ('Z', ), 'Z'),
            ('integral', (0, ), 0),
            ('integral', (-3600, ), -3600),
            ('isinstance', ('UTC', str), 'UTC'),
            ('less_or_equal', (15, 15), 15),
        ]
        for check_name, args, expect_ret in checks:
            with self.subTest(check=check_name):
                check = getattr(ASSERT, check_name)
                self.assertEqual(check(*args), expect_ret)

    def test_assertion_methods_fail(self):
        checks = [
            ('__call__', (0, 'some message'), 'some message'),
            ('not_empty', ('', ), r'expect non-empty value, not \'\''),
            ('integral', (1.5, ), r'expect integral value, not 1.5'),
            ('integral', (True, ), r'expect integral value, not True'),
            ('isinstance', (1, str), r'expect <class \'str\'>-typed value'),
            ('less_or_equal', (16, 15), r'expect x <= 15, not 16'),
        ]
        for check_name, args, pattern in checks:
            with self.subTest(check=check_name):
                check = getattr(ASSERT, check_name)
                with self.assertRaisesRegex(AssertionError, pattern):
                    check(*args)


if __name__ == '__main__':
    unittest.main()
