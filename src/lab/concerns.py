"""Library of design tensions a tweakable's concern function can report."""

from .models import Concern

ISSUE_65 = ("R&T #65 Equality semantics for -0 and NaN", "https://github.com/tc39/proposal-record-tuple/issues/65")

WITHOUT_BOX = Concern(
    key="withoutBox",
    title="complexity moved to ecosystem",
    body=(
        "Using symbols-as-weakmap-keys, symbols in Records and Tuples could still refer to "
        "objects/functions in a WeakMap. Code will need to ensure the necessary code has access "
        "to these WeakMap side tables. API conventions will need to be established to "
        "distinguish when symbols are being used in this way. Care will need to be taken with "
        "the WeakMaps: if a Map is used by accident there is a risk of memory leaks. Unless "
        "direct access to the WeakMap is hidden behind a wrapper, other code could "
        "remove/replace the referenced object.\n\n"
        "Box use-cases include composite keys for Maps/Sets, and (in React.js) creating and "
        "passing groups of values, possibly functions, around without triggering re-renders "
        "due to changing object identity."
    ),
    links=(("symbols-as-weakmap-keys", "https://github.com/tc39/proposal-symbols-as-weakmap-keys"),),
)

TYPEOF_POWERFUL_OBJECT_IS_NOT_OBJECT = Concern(
    key="typeofPowerfulObjectIsNotObject",
    title="security risk",
    body=(
        "Existing security sensitive code checks if a value has no-power by checking if its "
        "typeof is not 'object' or 'function', and will assume values with other results are "
        "safe to pass around without further inspection. These projects may not be updated "
        "before they start to interact with Records and Tuples."
    ),
)

VALID_WEAK_VALUE = Concern(
    key="validWeakValue",
    title="consistency change",
    body=(
        "Current code can rely on the consistency that values that have typeof 'object' and "
        "are not null can be stored weakly. If R&T introduces values that have typeof 'object' "
        "but throw when placed in a WeakSet this consistency is no longer reliable, and code "
        "will need to be updated."
    ),
)

WEAK_SET_LEAK = Concern(
    key="weakSetLeak",
    title="memory leak",
    body=(
        "If values are allowed in a WeakSet that are impossible to be garbage-collected this "
        "could create a silent memory leak."
    ),
)

SLOT_SENSITIVE_TYPEOF = Concern(
    key="slotSensitiveTypeof",
    title="slot sensitive typeof",
    body=(
        "If typeof a record or tuple changes depending on if there is a box transitively "
        "within its tree this makes typeof confusing. Code will have to rely on static methods "
        "like Record.isRecord instead."
    ),
)

CONFUSING_TYPEOF = Concern(
    key="confusingTypeof",
    title="problematic typeof",
    body=(
        "If a Tuple without a Box in its tree has typeof 'object', there is no value to be "
        "gained from a Tuple with a Box having typeof 'tuple', because if anything it is more "
        "like an object when it contains a Box."
    ),
)

OBJECT_WRAPPERS = Concern(
    key="objectWrappers",
    title="object wrappers",
    body="Having Object wrappers for Record and Tuple adds a risk to avoid and confusion when using JS.",
)

OBJECT_WRAPPER_INCONSISTENCY = Concern(
    key="objectWrapperInConsistency",
    title="object wrapper consistency",
    body="Usually values whose typeof is not 'object' or 'function' have Object wrapper versions of them.",
)

NO_BOXES_IN_WEAK_SETS = Concern(
    key="noBoxesInWeakSets",
    title="performance",
    body=(
        "Libraries may want to create values based on Records that contain boxes, for example "
        "mapping over a record and mapping each Box to something else. If this work is "
        "expensive, it may be beneficial to memoize the work using a WeakMap. But this "
        "wouldn't be possible if Records with Boxes can't be WeakMap keys."
    ),
)

UNEQUAL_TUPLE_NAN = Concern(
    key="unequalTupleNan",
    title="consistency change",
    body=(
        "Currently the only value not equal to itself is NaN, and this can be used as a "
        "reliable check for NaN. If any record or tuple containing a NaN within its tree is "
        "also not equal to itself, then there would be an infinite number of values not equal "
        "to themselves."
    ),
    links=(ISSUE_65,),
)

NO_NEGATIVE_ZERO = Concern(
    key="noNegativeZero",
    title="no negative zero",
    body=(
        "Negative zero can be stored in a standard Array. If negative zero was transformed "
        "into positive zero when stored in a tuple, then mapping arrays of numbers to and from "
        "tuples would not be isomorphic.\n\n"
        "Being able to store a negative zero is considered important to some users."
    ),
    links=(ISSUE_65,),
)

IMPOSSIBLE_EQUALITY_OF_ZEROS = Concern(
    key="impossibleEqualityOfZeros",
    title="impossible equality",
    body=(
        "If negative zero can not be stored in a Tuple (converted to +0), then #[-0] cannot "
        "compare unequal to #[+0]."
    ),
)

OBSERVABLE_DIFFERENT_BUT_IS_EQUAL = Concern(
    key="observableDifferentButIsEqual",
    title="Object.is semantics",
    body=(
        "Putting aside that two NaNs can be observably different, by storing them in a "
        "TypedArray and reading the bits: if Object.is returns true for two values this means "
        "the two values are not observably different, which is useful for memoization. For a "
        "pure function, if the inputs have not changed in an observable way then neither "
        "should the output. React.js for example uses Object.is for its change-detection. If "
        "two Tuples compare equal but have observably different values (one has positive zero "
        "and the other has negative zero), then this changes the semantics of Object.is and "
        "the use cases it can be applied to."
    ),
)

NAN_NOT_IS_NAN = Concern(
    key="nanNotIsNan",
    title="Object.is NaN semantics",
    body=(
        "If both 'Object.is(NaN, NaN)' and '#[NaN] === #[NaN]' are true, there does not "
        "appear to be a reason for Object.is(#[NaN], #[NaN]) to not be true."
    ),
)

CAN_NOT_ALWAYS_INTERN = Concern(
    key="canNotAlwaysIntern",
    title="can not always intern",
    body=(
        "Object interning is a technique used to reduce memory and speed up certain "
        "operations after the initial interning cost. If #[+0] equals #[-0] and storing "
        "negative zero in a tuple is preserved then record and tuple equality can not solely "
        "rely on interning."
    ),
)

ZEROS_NOT_TRIPLE_EQUAL = Concern(
    key="zerosNotTripleEqual",
    title="Triple equality semantics",
    body=(
        "As -0 === +0 on their own, it may surprise people that they are no longer treated as "
        "triple equal when compared via a record or tuple. This could lead to bugs."
    ),
    links=(ISSUE_65,),
)

STORING_PRIMITIVE_IN_BOX = Concern(
    key="storingPrimitiveInBox",
    title="storing primitives* in a Box",
    body=(
        "primitives*: here, a value that can be directly stored in a Record or Tuple, i.e. "
        "records, tuples, boxes, null, undefined, booleans, numbers, strings, symbols and "
        "bigints.\n\n"
        "The original rationale for Box is to let Records and Tuples explicitly reference a "
        "value that would otherwise be disallowed, e.g. functions. Values like numbers can "
        "already be stored in a Record or Tuple. Allowing primitives* in a Box may be "
        "ergonomic for the producer, but moves complexity to consumers, who can no longer rely "
        "on a Box always referencing a non-primitive*.\n\n"
        "Checking whether a Record contains an Object matters for cycle checks, crossing a "
        "ShadowRealm boundary, or storing values in a WeakMap. If primitives* can be boxed, "
        "that check can no longer be a single Box.containsBoxes call; helpers such as "
        "Object.containsObject or Box.containsBoxWithIdentity would be needed instead. They "
        "can be written in user-land by walking the tree."
    ),
    links=(
        ("R&T #238 Behavior of Box(Box(x))", "https://github.com/tc39/proposal-record-tuple/issues/238"),
        (
            "R&T #231 Boxes: How to expose a way to detect boxes in R&T?",
            "https://github.com/tc39/proposal-record-tuple/issues/231",
        ),
    ),
)

NO_PRIMITIVES_IN_BOX = Concern(
    key="noPrimitivesInBox",
    title="Box construction ergonomics",
    body=(
        "If the Box constructor throws for values that can be 'stored' directly in a Record "
        "and Tuple, such as strings, numbers, booleans, code using Boxes generically must "
        "check whether a value can be boxed first, or handle the exception. On the other hand "
        "the exception may clarify the purpose of Boxes and make unnecessary boxing impossible."
    ),
)

RECORD_PROXIES = Concern(
    key="recordProxies",
    title="Record proxies",
    body=(
        "A Record-Proxy would not be able to be much different from "
        "'new Proxy(Object.freeze({...record}), handler)'. If the Proxy retained Record "
        "semantics, equality checks would need to trigger the traps, running arbitrary JS "
        "during previously safe operations like '==='. So the proxy can not be transparent "
        "and would be an object, not a record. Throwing instead keeps this API space open."
    ),
)

PROXY_THROW_TYPEOF_OBJECT = Concern(
    key="proxyThrowTypeofObject",
    title="proxy ergonomics",
    body=(
        "Usually if something has typeof 'object' then it is safe to create a proxy of it. If "
        "records and tuples are typeof 'object' and throw when passed to the proxy "
        "constructor, users must manually convert them into frozen objects first."
    ),
)

DIFFERENT_EQUALITY_FOR_TYPEOF_OBJECT = Concern(
    key="differenceBetweenEqualityForTypeofObject",
    title="different equality of an object-like value",
    body=(
        "In current JavaScript if two values 'a' and 'b' both have typeof 'object' then "
        "'a === b' and 'Object.is(a, b)' always return the same result.\n\n"
        "The current laboratory setup breaks that invariant: two tuples differing only in the "
        "sign of a zero would both have typeof 'object' and be '===' equal, but not equal "
        "when compared by Object.is."
    ),
)
