"""Handles interactive/command-line mode for lnorm. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Lambda calculus normalizer shell."""
    intro = "Lambda calculus normalizer :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def default(self, line):
        """Reduces an arbitrary λ-term."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            if self._tmp_line:
                line = f"{self._tmp_line} {line}"
            line, add_to_prev = self.sess.preprocess_line(line, self.line_num, False)

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt

            if line:
                self.sess.add(line, self.line_num)
                self.sess.run()

    def do_steps(self, arg):
        """Toggles printing of reduction steps ('steps on' / 'steps off')."""
        if arg not in ("on", "off", ""):
            print("usage: steps [on|off]")
            return
        self.sess.quiet = arg == "off" if arg else not self.sess.quiet
        print(f"steps {'off' if self.sess.quiet else 'on'}")

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the lnorm normalizer!\n\n"
              "Type a λ-term to reduce it to beta-normal form. Terms are variables, abstractions\n"
              "'λx.body', or applications '(left right)', which always take parentheses.\n"
              "AND, NOT, TRUE, FALSE and COND stand for Church booleans, and '_' stands for a space.\n\n"
              "Try it out by typing '(λx.x y)'. This will apply 'λx.x' to 'y', giving 'y' as\n"
              "the result, followed by the steps taken. Type 'steps off' to hide the steps.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits normalizer."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits normalizer."""
        return True
