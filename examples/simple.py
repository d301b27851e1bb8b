import logging

import cantus

logging.basicConfig(level=logging.INFO)

# A rising phrase, then its answer: the same phrase turned around and
# dropped a fourth, without the repeated peak.
phrase = cantus.numseq([60, 62, 64, 65, 67])
answer = phrase.retrograde().drop().transpose(-5)

melody = phrase.append(answer)

logging.info(f"Melody: {melody.to_numeric_values()}")

# Every third note an octave up, leaving the others alone.
accented = melody.map_nth(3, lambda note, i: note.transpose(12))

logging.info(f"Accented: {accented.to_numeric_values()}")

# Replace each step of a whole tone with a passing note.
filled = melody.replace_if_window(
	2, 1,
	lambda pair, i: pair[1].val() - pair[0].val() == 2,
	lambda pair, i: [pair[0], pair[0].transpose(1)]
)

logging.info(f"Chromatic: {filled.to_numeric_values()}")

# Keep trimming the ends until the phrase fits in a bar of 4.
trimmed = melody.while_(lambda s: s.length > 4).do(lambda s: s.drop().drop_right())

logging.info(f"Trimmed: {trimmed.to_numeric_values()}")

# Branch inside a chain: long phrases are cut to 8 notes, short ones looped to 8.
bar = (
	melody
	.if_(lambda s: s.length >= 8)
		.then(lambda s: s.keep(8))
		.else_(lambda s: s.loop(8))
	.endif()
)

logging.info(f"Bar: {bar.to_numeric_values()}")
